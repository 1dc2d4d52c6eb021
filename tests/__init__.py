"""
Test suite for growth_decay

Contains:
- tests/unit/          : Unit tests for individual modules
"""
