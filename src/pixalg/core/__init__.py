"""
Core value types, mathematical primitives, and contracts.

This package contains the foundational building blocks that are independent
of any array, cursor, or I/O framework.
"""
