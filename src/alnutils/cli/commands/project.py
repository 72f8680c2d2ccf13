"""Project command implementation."""

import sys

from alnutils.errors import AlignmentError
from alnutils.transform.codon import project_to_coding_coordinates

from .rows import (
    alignment_to_records,
    fail,
    format_alignment,
    load_alignment_or_exit,
    parse_mapping,
    to_json,
)


def run_project(
    rows: list[str],
    cds: list[str],
    format: str,
    quiet: bool,
):
    """Project a protein alignment onto its coding sequences and print it."""
    aln = load_alignment_or_exit(rows)

    try:
        coding_sequences = parse_mapping(cds)
    except ValueError as e:
        fail("Could not read coding sequences", e)

    if not quiet:
        print(
            f"Projecting {aln.n_species} sequences onto codons "
            f"({aln.n_sites} -> {aln.n_sites * 3} columns)",
            file=sys.stderr,
        )

    try:
        dna_aln = project_to_coding_coordinates(aln, coding_sequences)
    except AlignmentError as e:
        fail("Projection failed", e)

    if format == "json":
        print(to_json(alignment_to_records(dna_aln)))
    else:
        print(format_alignment(dna_aln))
