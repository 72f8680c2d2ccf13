"""
Pytest configuration and shared fixtures.
"""

import pytest
from typer.testing import CliRunner

from alnutils.core.alignment import AlignedSequence, Alignment


@pytest.fixture
def cli_runner():
    """CLI test runner for Typer apps."""
    return CliRunner()


@pytest.fixture
def bci_alignment():
    """Two-row DNA alignment from the BCI format example."""
    return Alignment([
        AlignedSequence("seq1", "GGATCCATTCCTACT"),
        AlignedSequence("seq2", "GGAT--ATTCCTCCT"),
    ])


@pytest.fixture
def protein_alignment():
    """Small protein alignment with gaps in two rows."""
    return Alignment([
        AlignedSequence("human", "MKV-LA"),
        AlignedSequence("mouse", "MKVRLA"),
        AlignedSequence("chicken", "M-VRLA"),
    ])


@pytest.fixture
def coding_sequences():
    """Spliced coding sequences for ``protein_alignment``."""
    return {
        "human": "ATGAAAGTTCTGGCC",
        "mouse": "ATGAAGGTCCGTCTTGCA",
        "chicken": "ATGGTGAGACTAGCT",
    }
