"""
Domain models and value objects.

Contains the AlphaSequence value object built on top of the Sequence Codec.
"""

from src.core.domain.sequence import AlphaSequence

__all__ = [
    "AlphaSequence",
]
