"""
alnutils: utilities for converting and manipulating sequence alignments.

Quick Start
-----------
Project a protein alignment onto its coding sequences:

>>> from alnutils import Alignment, AlignedSequence, project_to_coding_coordinates
>>> aa_aln = Alignment([
...     AlignedSequence("human", "MK-L"),
...     AlignedSequence("mouse", "MKRL"),
... ])
>>> cds = {"human": "ATGAAACTG", "mouse": "ATGAAGCGTCTG"}
>>> dna_aln = project_to_coding_coordinates(aa_aln, cds)
>>> dna_aln.get_seq_by_id("human").sequence
'ATGAAA---CTG'

Generate bootstrap replicates:

>>> from alnutils import bootstrap_replicates
>>> replicates = bootstrap_replicates(dna_aln, 100, seed=1)

Summarize per-column disagreement:

>>> from alnutils import bracket_string
>>> bracket_string(aa_aln)
'MK[-/R]L'
"""

__version__ = "0.1.0"

# Alignment model
from .core.alignment import (
    AlignedSequence,
    Alignment,
    CodingSequence,
    normalize_gaps,
    GAP,
    CODON_SIZE,
)

# Transformations
from .transform import (
    project_to_coding_coordinates,
    bootstrap_replicates,
    BootstrapResampler,
    bracket_string,
    bracket_tokens,
)

# Errors
from .errors import (
    AlignmentError,
    MalformedAlignment,
    MissingCodingSequence,
    EmptyAlignment,
)

__all__ = [
    # Alignment model
    "AlignedSequence",
    "Alignment",
    "CodingSequence",
    "normalize_gaps",
    "GAP",
    "CODON_SIZE",

    # Transformations
    "project_to_coding_coordinates",
    "bootstrap_replicates",
    "BootstrapResampler",
    "bracket_string",
    "bracket_tokens",

    # Errors
    "AlignmentError",
    "MalformedAlignment",
    "MissingCodingSequence",
    "EmptyAlignment",

    # Version
    "__version__",
]
