"""
Core engine, value types and contracts.

Pure computational building blocks: no I/O, no shared mutable state.
"""
