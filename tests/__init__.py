"""
Test suite for occurrence multiplicity

Contains:
- tests/unit/          : Unit tests for individual modules
"""
