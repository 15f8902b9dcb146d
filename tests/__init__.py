"""
Test suite for checked_float

Contains:
- tests/unit/          : Unit and property-based tests for individual modules
"""
