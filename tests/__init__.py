"""
Test suite for the BigInt decimal engine

Contains:
- tests/unit/          : Unit and property tests for individual modules
"""
