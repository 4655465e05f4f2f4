"""
Tests for the FASTA reading adapter.
"""

import pytest
from gccontent.errors import FormatError, InputUnavailable
from gccontent.io.fasta_reader import SequenceRecord, read_records


class TestReadRecords:
    """Tests for read_records."""

    def test_multiple_records_in_order(self, fasta):
        path = fasta(">chr1 first chromosome\nACGT\nGGCC\n>chr2\nNNNN\n")
        records = read_records(path)
        assert [r.id for r in records] == ["chr1", "chr2"]
        assert records[0].description == "first chromosome"
        assert records[0].seq == b"ACGTGGCC"
        assert records[1].description == ""
        assert records[1].seq == b"NNNN"

    def test_non_acgt_bytes_are_kept(self, fasta):
        path = fasta(b">x\nACgtN-*\xe9\n")
        assert read_records(path)[0].seq == b"ACgtN-*\xe9"

    def test_interior_spaces_are_dropped(self, fasta):
        """Biopython remove espaços dentro das linhas de sequência."""
        rec = read_records(fasta(">x\nGG CC\nA T\n"))[0]
        assert rec.seq == b"GGCCAT"

    def test_empty_file_has_no_records(self, fasta):
        assert read_records(fasta("")) == []

    def test_leading_blank_lines(self, fasta):
        assert read_records(fasta("\n\n>x\nAC\n"))[0].seq == b"AC"

    def test_missing_header_is_format_error(self, fasta):
        with pytest.raises(FormatError):
            read_records(fasta("ACGT\n>x\nAC\n"))

    def test_missing_file(self, tmp_path):
        with pytest.raises(InputUnavailable) as exc_info:
            read_records(tmp_path / "nope.fa")
        assert "nope.fa" in str(exc_info.value)

    def test_directory_is_unavailable(self, tmp_path):
        with pytest.raises(InputUnavailable):
            read_records(tmp_path)


class TestSequenceRecord:
    """Tests for SequenceRecord."""

    def test_from_title(self):
        rec = SequenceRecord.from_title("id1  some  words ", "ACGT")
        assert rec.id == "id1"
        assert rec.description == "some  words"
        assert len(rec) == 4

    def test_empty_title(self):
        rec = SequenceRecord.from_title("", "AC")
        assert rec.id == ""
        assert rec.description == ""
