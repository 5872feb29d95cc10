"""
Core arithmetic engine, value types, and contracts.

This package contains the decimal digit engine and the BigInt value type,
independent of any I/O or external systems.
"""
