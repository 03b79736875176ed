"""
Test suite for the order packet codec

Contains:
- tests/unit/          : Unit tests for individual modules
"""
