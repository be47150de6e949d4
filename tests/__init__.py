"""
Test suite for infint

Contains:
- tests/unit/          : Unit tests for individual modules
"""
