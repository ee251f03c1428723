"""
Test suite for exactlinalg

Contains:
- tests/unit/          : Unit tests for individual modules
"""
