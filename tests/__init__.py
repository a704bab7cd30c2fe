"""
Test suite for bignum

Contains:
- tests/unit/          : Unit tests for normalization, ScientificNumber and formatting
"""
