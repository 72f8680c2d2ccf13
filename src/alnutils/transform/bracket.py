"""
Bracketed consensus strings (BCI format).
"""

from typing import Iterator

from ..core.alignment import Alignment


def bracket_tokens(alignment: Alignment) -> Iterator[str]:
    """
    Yield one token per alignment column.

    A column whose rows all agree yields the shared character; any other
    column yields every row's character, in row order, as ``[a/b/...]``.
    """
    if not isinstance(alignment, Alignment):
        raise TypeError(
            f"Expected an Alignment, got {type(alignment).__name__}"
        )
    for column in zip(*(seq.sequence for seq in alignment.each_seq())):
        if len(set(column)) > 1:
            yield '[' + '/'.join(column) + ']'
        else:
            yield column[0]


def bracket_string(alignment: Alignment) -> str:
    """
    Create a bracketed consensus-like string for an alignment.

    All residues (gaps and ambiguity codes included) from every sequence are
    represented. Where a column is not unanimous, each sequence's residue is
    listed in alignment order inside brackets.

    Examples
    --------
    >>> aln = Alignment([
    ...     AlignedSequence("seq1", "GGATCCATTCCTACT"),
    ...     AlignedSequence("seq2", "GGAT--ATTCCTCCT"),
    ... ])
    >>> bracket_string(aln)
    'GGAT[C/-][C/-]ATTCCT[A/C]CT'

    Notes
    -----
    Output gets noisy quickly for protein alignments or many sequences.
    """
    return ''.join(bracket_tokens(alignment))
