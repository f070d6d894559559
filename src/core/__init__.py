"""
Core domain models, numerical algorithms, and invariants.

This module contains the matrix grid, its text notation, the elimination
engine and the result contract; it is independent of the console shell.
"""
