"""
Projection of protein alignments onto coding-sequence coordinates.
"""

from typing import Mapping, Union

from ..core.alignment import (
    CODON_GAP,
    CODON_SIZE,
    GAP,
    AlignedSequence,
    Alignment,
    CodingSequence,
    normalize_gaps,
)
from ..errors import MalformedAlignment, MissingCodingSequence


def _nucleotides(cds: Union[CodingSequence, AlignedSequence, str]) -> str:
    if isinstance(cds, str):
        return cds
    return cds.sequence


def _project_row(row: AlignedSequence, dna: str, n_sites: int) -> AlignedSequence:
    start_offset = (row.start - 1) * CODON_SIZE
    aa_seq = row.sequence

    codons = []
    j = 0
    for i in range(n_sites):
        # Reads past the stored row count as residues
        pos = i + start_offset
        char = aa_seq[pos] if pos < len(aa_seq) else None
        if char == GAP or j >= len(dna):
            codons.append(CODON_GAP)
        else:
            codons.append(dna[j:j + CODON_SIZE])
            j += CODON_SIZE

    nt_seq = ''.join(codons)
    nt_seq += GAP * (n_sites * CODON_SIZE - len(nt_seq))

    return AlignedSequence(
        id=row.id,
        sequence=nt_seq,
        start=start_offset + 1,
        end=row.end * CODON_SIZE,
        strand=1,
        alphabet='dna',
    )


def project_to_coding_coordinates(
    alignment: Alignment,
    coding_sequences: Mapping[str, Union[CodingSequence, AlignedSequence, str]],
) -> Alignment:
    """
    Convert a protein alignment into nucleotide space.

    Each alignment column becomes one codon: residues are replaced by the
    next three bases of the row's coding sequence and gaps by '---'.
    Equivalent to Bill Pearson's mrtrans.

    Parameters
    ----------
    alignment : Alignment
        Amino acid alignment. Row start/end must refer to the full-length
        protein even when the alignment is local.
    coding_sequences : mapping
        Row id -> spliced coding sequence (CodingSequence, any object with a
        ``sequence`` attribute, or str). Sequences must be in frame +1
        (GFF frame 0); this is not checked.

    Returns
    -------
    Alignment
        Nucleotide alignment with 3x the columns, rows in input order, on
        the forward strand

    Raises
    ------
    MalformedAlignment
        If the alignment has no rows or a row starts before position 1
    MissingCodingSequence
        If a row id has no coding sequence

    Notes
    -----
    A coding sequence shorter than the alignment requires is not an error:
    columns after it runs out are filled with gap codons.

    Examples
    --------
    >>> aln = Alignment([AlignedSequence("a", "M-K"), AlignedSequence("b", "MRK")])
    >>> cds = {"a": "ATGAAA", "b": "ATGCGTAAA"}
    >>> [s.sequence for s in project_to_coding_coordinates(aln, cds)]
    ['ATG---AAA', 'ATGCGTAAA']
    """
    if not isinstance(alignment, Alignment):
        raise TypeError(
            f"Expected an Alignment, got {type(alignment).__name__}"
        )
    if alignment.n_species == 0:
        raise MalformedAlignment("Cannot project an alignment with no sequences")

    # Validate everything up front so no partial alignment is built
    for row in alignment.each_seq():
        if coding_sequences.get(row.id) is None:
            raise MissingCodingSequence(row.id)
        if row.start < 1:
            raise MalformedAlignment(
                f"Sequence '{row.id}' has start {row.start}; coordinates are 1-based"
            )

    aa_aln = normalize_gaps(alignment)
    n_sites = aa_aln.length()

    dna_aln = Alignment()
    for row in aa_aln.each_seq():
        dna = _nucleotides(coding_sequences[row.id])
        dna_aln.add_seq(_project_row(row, dna, n_sites))

    return dna_aln
