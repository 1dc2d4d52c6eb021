"""
Core domain models, mathematical primitives, and invariants.

Everything here is pure arithmetic on in-memory values: no I/O, no threads,
no global mutable state.
"""
