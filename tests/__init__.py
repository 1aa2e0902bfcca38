"""
Test suite for qcomplex

Contains:
- tests/unit/          : Unit tests for individual modules
"""
