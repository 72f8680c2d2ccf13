"""Bracket command implementation."""

from alnutils.transform.bracket import bracket_string

from .rows import load_alignment_or_exit


def run_bracket(rows: list[str]):
    """Print the bracket string of an inline alignment."""
    aln = load_alignment_or_exit(rows)
    print(bracket_string(aln))
