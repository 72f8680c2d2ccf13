"""
Alignment transformations.

- **Codon projection**: protein alignment to nucleotide coordinates
- **Bootstrap**: column-resampled pseudo-replicates
- **Bracket strings**: per-column ambiguity summary
"""

from alnutils.transform.bootstrap import BootstrapResampler, bootstrap_replicates
from alnutils.transform.bracket import bracket_string, bracket_tokens
from alnutils.transform.codon import project_to_coding_coordinates

__all__ = [
    "project_to_coding_coordinates",
    "bootstrap_replicates",
    "BootstrapResampler",
    "bracket_string",
    "bracket_tokens",
]
