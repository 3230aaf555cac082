"""
Test suite for the checked fixed-width integer library

Contains:
- tests/unit/          : Unit tests for individual modules
"""
