"""
Test suite for the radix converter

Contains:
- tests/unit/          : Unit tests for domain models, codecs, converter and shell
"""
