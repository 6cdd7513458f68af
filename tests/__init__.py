"""
Test suite for polycalc

Contains:
- tests/unit/          : Unit tests for individual modules
"""
