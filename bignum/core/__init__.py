"""
Core domain model, normalization primitives, and formatting.

Pure value-type code: no I/O, no shared state.
"""
