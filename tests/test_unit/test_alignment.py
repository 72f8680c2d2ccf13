"""
Unit tests for the alignment model.
"""

import pytest

from alnutils.core.alignment import (
    AlignedSequence,
    Alignment,
    CodingSequence,
    normalize_gaps,
)
from alnutils.errors import AlignmentError, MalformedAlignment


class TestAlignedSequence:
    """Test row construction and coordinates."""

    def test_default_coordinates(self):
        """End is derived from the ungapped length."""
        seq = AlignedSequence("a", "AC--GT")
        assert seq.start == 1
        assert seq.end == 4
        assert seq.strand is None

    def test_end_offset_by_start(self):
        seq = AlignedSequence("a", "AC.GT", start=10)
        assert seq.end == 13

    def test_explicit_end_kept(self):
        seq = AlignedSequence("a", "ACGT", start=5, end=100)
        assert seq.end == 100

    def test_ungapped(self):
        assert AlignedSequence("a", "A-C.G").ungapped() == "ACG"

    def test_invalid_strand(self):
        with pytest.raises(ValueError, match="Invalid strand"):
            AlignedSequence("a", "ACGT", strand=2)

    @pytest.mark.parametrize("strand", [1, -1, 0, None])
    def test_valid_strands(self, strand):
        assert AlignedSequence("a", "ACGT", strand=strand).strand == strand


class TestAlignment:
    """Test alignment construction and queries."""

    def test_basic_properties(self, bci_alignment):
        assert bci_alignment.length() == 15
        assert bci_alignment.n_sites == 15
        assert bci_alignment.n_species == 2
        assert bci_alignment.names == ["seq1", "seq2"]

    def test_each_seq_preserves_order(self):
        ids = ["z", "a", "m", "b"]
        aln = Alignment(AlignedSequence(i, "AC") for i in ids)
        assert [s.id for s in aln.each_seq()] == ids
        assert [s.id for s in aln] == ids

    def test_unequal_lengths_rejected(self):
        with pytest.raises(MalformedAlignment, match="expected 4"):
            Alignment([
                AlignedSequence("a", "ACGT"),
                AlignedSequence("b", "ACG"),
            ])

    def test_add_seq_unequal_length_rejected(self, bci_alignment):
        with pytest.raises(MalformedAlignment):
            bci_alignment.add_seq(AlignedSequence("seq3", "GGAT"))
        assert bci_alignment.n_species == 2

    def test_duplicate_id_rejected(self):
        aln = Alignment([AlignedSequence("a", "ACGT")])
        with pytest.raises(MalformedAlignment, match="Duplicate"):
            aln.add_seq(AlignedSequence("a", "TTTT"))

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            Alignment([AlignedSequence("a", "A"), AlignedSequence("b", "AA")])
        assert issubclass(MalformedAlignment, AlignmentError)

    def test_empty_alignment(self):
        aln = Alignment()
        assert aln.length() == 0
        assert aln.n_species == 0
        assert list(aln.each_seq()) == []

    def test_rows_copied_on_insert(self):
        row = AlignedSequence("a", "ACGT")
        aln = Alignment([row, AlignedSequence("b", "ACGA")])

        row.sequence = "AC"

        assert aln.get_seq_by_id("a").sequence == "ACGT"
        assert aln.length() == 4

    def test_get_seq_by_id(self, bci_alignment):
        assert bci_alignment.get_seq_by_id("seq2").sequence == "GGAT--ATTCCTCCT"
        with pytest.raises(KeyError):
            bci_alignment.get_seq_by_id("missing")

    def test_column(self, bci_alignment):
        assert bci_alignment.column(0) == "GG"
        assert bci_alignment.column(4) == "C-"

    def test_to_array(self, bci_alignment):
        arr = bci_alignment.to_array()
        assert arr.shape == (2, 15)
        assert arr[1, 4] == "-"
        assert "".join(arr[0]) == "GGATCCATTCCTACT"

    def test_to_array_empty(self):
        assert Alignment().to_array().shape == (0, 0)

    def test_map_chars_returns_copy(self):
        aln = Alignment([AlignedSequence("a", "AC.T")])
        mapped = aln.map_chars(r"\.", "-")
        assert mapped.get_seq_by_id("a").sequence == "AC-T"
        assert aln.get_seq_by_id("a").sequence == "AC.T"

    def test_repr(self, bci_alignment):
        repr_str = repr(bci_alignment)
        assert "n_species=2" in repr_str
        assert "n_sites=15" in repr_str


class TestNormalizeGaps:
    """Test gap normalization."""

    def test_dots_become_dashes(self):
        aln = Alignment([
            AlignedSequence("a", "M.K-"),
            AlignedSequence("b", "..KL"),
        ])
        normalized = normalize_gaps(aln)
        assert [s.sequence for s in normalized] == ["M-K-", "--KL"]

    def test_input_untouched(self):
        aln = Alignment([AlignedSequence("a", "M.K")])
        normalize_gaps(aln)
        assert aln.get_seq_by_id("a").sequence == "M.K"

    def test_coordinates_preserved(self):
        aln = Alignment([AlignedSequence("a", "M.K", start=4, end=5, strand=-1)])
        row = normalize_gaps(aln).get_seq_by_id("a")
        assert (row.start, row.end, row.strand) == (4, 5, -1)

    def test_custom_gap_chars(self):
        aln = Alignment([AlignedSequence("a", "M~K.")])
        normalized = normalize_gaps(aln, gap_chars="~.")
        assert normalized.get_seq_by_id("a").sequence == "M-K-"


class TestCodingSequence:

    def test_length(self):
        cds = CodingSequence("a", "ATGAAA")
        assert cds.length == 6
