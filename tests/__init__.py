"""
Test suite for cfrac

Contains:
- tests/unit/          : Unit tests for individual modules
"""
