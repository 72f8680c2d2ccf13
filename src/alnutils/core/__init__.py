"""
Core alignment data structures.
"""

from alnutils.core.alignment import (
    CODON_GAP,
    CODON_SIZE,
    GAP,
    GAP_LIKE,
    AlignedSequence,
    Alignment,
    CodingSequence,
    normalize_gaps,
)

__all__ = [
    "AlignedSequence",
    "Alignment",
    "CodingSequence",
    "normalize_gaps",
    "GAP",
    "GAP_LIKE",
    "CODON_SIZE",
    "CODON_GAP",
]
