"""
Core domain models, conversion primitives, and invariants.

This module contains the foundational building blocks of the radix converter
that are independent of the input shell (stdin, grammar checks, output).
"""
