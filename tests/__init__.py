"""
Test suite for pixalg

Contains:
- tests/unit/          : Unit tests for individual modules
"""
