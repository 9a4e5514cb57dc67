"""
Test suite for alphaseq

Contains:
- tests/unit/          : Unit tests for individual modules
"""
