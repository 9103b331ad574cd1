"""
Test suite for lemath

Contains:
- tests/unit/          : Unit tests for individual modules
"""
