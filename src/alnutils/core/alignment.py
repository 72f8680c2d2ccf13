"""
In-memory multiple sequence alignment.
"""

import re
from dataclasses import dataclass, replace
from typing import Iterable, Iterator, Optional

import numpy as np

from ..errors import MalformedAlignment


# Canonical gap symbol and the characters normalized to it
GAP = '-'
GAP_LIKE = '.'

# Nucleotides per amino acid position
CODON_SIZE = 3
CODON_GAP = GAP * CODON_SIZE

_VALID_STRANDS = (1, -1, 0, None)


@dataclass
class AlignedSequence:
    """
    One row of a multiple sequence alignment.

    Attributes
    ----------
    id : str
        Identifier, unique within an alignment
    sequence : str
        Residues and gap symbols; one character per alignment column
    start : int
        1-based position of the first residue in the ungapped sequence
    end : int, optional
        1-based inclusive position of the last residue. Derived from the
        number of non-gap characters when not given.
    strand : int, optional
        1, -1, 0 or None (unset)
    alphabet : str, optional
        Free-text tag such as 'dna' or 'protein'
    """

    id: str
    sequence: str
    start: int = 1
    end: Optional[int] = None
    strand: Optional[int] = None
    alphabet: Optional[str] = None

    def __post_init__(self):
        if self.strand not in _VALID_STRANDS:
            raise ValueError(
                f"Invalid strand {self.strand!r} for '{self.id}': "
                "expected 1, -1, 0 or None"
            )
        if self.end is None:
            self.end = self.start + len(self.ungapped()) - 1

    def ungapped(self, gap_chars: str = GAP + GAP_LIKE) -> str:
        """Return the sequence with gap characters removed."""
        return ''.join(c for c in self.sequence if c not in gap_chars)

    def __len__(self) -> int:
        return len(self.sequence)


@dataclass(frozen=True)
class CodingSequence:
    """Ungapped nucleotide sequence an aligned protein row was translated from."""

    id: str
    sequence: str

    @property
    def length(self) -> int:
        return len(self.sequence)


class Alignment:
    """
    Multiple sequence alignment.

    Rows keep their insertion order; derived alignments list their rows in
    the same order as the alignment they were built from.

    Parameters
    ----------
    seqs : iterable of AlignedSequence, optional
        Initial rows

    Raises
    ------
    MalformedAlignment
        If rows differ in length or an id is repeated

    Examples
    --------
    >>> aln = Alignment([
    ...     AlignedSequence("seq1", "GGATCC"),
    ...     AlignedSequence("seq2", "GGAT--"),
    ... ])
    >>> aln.length()
    6
    >>> aln.names
    ['seq1', 'seq2']
    """

    def __init__(self, seqs: Optional[Iterable[AlignedSequence]] = None):
        self._seqs: list[AlignedSequence] = []
        self._ids: set[str] = set()
        for seq in seqs or ():
            self.add_seq(seq)

    def add_seq(self, seq: AlignedSequence) -> None:
        """
        Append a fully-formed row.

        The row is copied, so later changes to the caller's object do not
        affect the alignment.

        Raises
        ------
        MalformedAlignment
            If the row length differs from the existing rows or its id is
            already present
        """
        if self._seqs and len(seq.sequence) != self.length():
            raise MalformedAlignment(
                f"Sequence '{seq.id}' has length {len(seq.sequence)}, "
                f"expected {self.length()}"
            )
        if seq.id in self._ids:
            raise MalformedAlignment(f"Duplicate sequence id '{seq.id}'")
        self._seqs.append(replace(seq))
        self._ids.add(seq.id)

    def each_seq(self) -> Iterator[AlignedSequence]:
        """Yield rows in insertion order."""
        return iter(self._seqs)

    def __iter__(self) -> Iterator[AlignedSequence]:
        return self.each_seq()

    def length(self) -> int:
        """Number of alignment columns (0 for an alignment with no rows)."""
        if not self._seqs:
            return 0
        return len(self._seqs[0].sequence)

    @property
    def n_sites(self) -> int:
        return self.length()

    @property
    def n_species(self) -> int:
        return len(self._seqs)

    @property
    def names(self) -> list[str]:
        return [seq.id for seq in self._seqs]

    def get_seq_by_id(self, seq_id: str) -> AlignedSequence:
        for seq in self._seqs:
            if seq.id == seq_id:
                return seq
        raise KeyError(seq_id)

    def column(self, index: int) -> str:
        """Characters of one column, read across rows in row order."""
        return ''.join(seq.sequence[index] for seq in self._seqs)

    def to_array(self) -> np.ndarray:
        """
        Alignment as a character matrix.

        Returns
        -------
        ndarray, shape (n_species, n_sites)
            One single-character string per cell
        """
        if not self._seqs:
            return np.empty((0, 0), dtype='<U1')
        return np.array([list(seq.sequence) for seq in self._seqs], dtype='<U1')

    def map_chars(self, pattern: str, replacement: str) -> "Alignment":
        """
        Substitute characters in every row.

        Parameters
        ----------
        pattern : str
            Regular expression matched against each sequence
        replacement : str
            Replacement text; must keep row lengths equal

        Returns
        -------
        Alignment
            New alignment; this one is left unchanged
        """
        regex = re.compile(pattern)
        return Alignment(
            replace(seq, sequence=regex.sub(replacement, seq.sequence))
            for seq in self._seqs
        )

    def copy(self) -> "Alignment":
        return Alignment(self._seqs)

    def __repr__(self) -> str:
        return f"Alignment(n_species={self.n_species}, n_sites={self.n_sites})"


def normalize_gaps(
    alignment: Alignment, gap_chars: str = GAP_LIKE, gap: str = GAP
) -> Alignment:
    """
    Replace gap-like characters with the canonical gap symbol.

    Parameters
    ----------
    alignment : Alignment
        Source alignment (not modified)
    gap_chars : str
        Characters to treat as gaps
    gap : str
        Canonical gap symbol

    Returns
    -------
    Alignment
        Normalized copy
    """
    if not gap_chars:
        return alignment.copy()
    return alignment.map_chars('[' + re.escape(gap_chars) + ']', gap)
