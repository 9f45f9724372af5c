"""
Tests for (k, L, t)-clump finding.
"""

import pytest

from orifind import clumps, common, kmers


class TestFindClumps:
    """Test the exhaustive per-window clump search."""

    def test_textbook_example(self, clump_genome):
        result = clumps.find_clumps(clump_genome, 5, 75, 4)
        assert "CGACA" in result
        assert result == {"AATGT", "CGACA", "GAAGA"}

    def test_shorter_window(self, clump_genome):
        assert clumps.find_clumps(clump_genome, 5, 50, 4) == {"GAAGA"}

    def test_window_spans_genome(self, clump_genome):
        """A single window reduces to thresholding the global table."""
        table = kmers.frequency_table(clump_genome, 5)
        expected = {kmer for kmer, count in table.items() if count >= 4}
        assert clumps.find_clumps(clump_genome, 5, len(clump_genome), 4) == expected

    def test_any_window_suffices(self):
        # AC is clumped only at the start, GT and TG only at the end
        genome = "ACACAC" + "T" * 10 + "GTGTGT"
        assert clumps.find_clumps(genome, 2, 6, 3) == {"AC", "GT", "TG", "TT"}

    def test_threshold_one_returns_all_kmers(self, clump_genome):
        assert clumps.find_clumps(clump_genome, 4, 20, 1) == set(kmers.frequency_table(clump_genome, 4))

    def test_no_clumps(self):
        assert clumps.find_clumps("ACGTACGTAC", 3, 5, 2) == set()

    @pytest.mark.parametrize("k, window, threshold", [
        (0, 10, 2),
        (3, 0, 2),
        (3, 10, 0),
        (3, 200, 2),
        (11, 10, 2),
    ])
    def test_invalid_parameters(self, clump_genome, k, window, threshold):
        with pytest.raises(common.InvalidLengthError):
            clumps.find_clumps(clump_genome, k, window, threshold)

    def test_empty_genome(self):
        with pytest.raises(common.EmptyInputError):
            clumps.find_clumps("", 3, 10, 2)


class TestFindClumpsSliding:
    """Test that the incremental variant matches the exhaustive search."""

    @pytest.mark.parametrize("k, window, threshold", [
        (5, 75, 4),
        (5, 50, 4),
        (3, 30, 3),
        (2, 10, 2),
        (1, 5, 3),
        (5, 100, 4),
    ])
    def test_matches_exhaustive(self, clump_genome, k, window, threshold):
        expected = clumps.find_clumps(clump_genome, k, window, threshold)
        assert clumps.find_clumps_sliding(clump_genome, k, window, threshold) == expected

    def test_matches_exhaustive_vibrio(self, vibrio_ori):
        expected = clumps.find_clumps(vibrio_ori, 9, 500, 3)
        assert clumps.find_clumps(vibrio_ori, 9, 500, 3, sliding=True) == expected
        assert {"ATGATCAAG", "CTTGATCAT"} <= expected

    def test_invalid_parameters(self, clump_genome):
        with pytest.raises(common.InvalidLengthError):
            clumps.find_clumps_sliding(clump_genome, 5, 75, 0)
