"""
Core codec, domain models, and contracts.

This module contains the foundational building blocks: the bijective base-26
Sequence Codec, the AlphaSequence value object, and JSON record contracts.
"""
