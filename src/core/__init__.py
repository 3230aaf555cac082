"""
Core checked-arithmetic building blocks.

Overflow primitives, the checked fixed-width integer value type and its
serialization contracts. Independent of any I/O or external systems.
"""
