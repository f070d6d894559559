"""
Test suite for matrix-echelon

Contains:
- tests/unit/          : Unit tests for individual modules and the shell
"""
