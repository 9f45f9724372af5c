"""
Shared fixtures for the ORIFIND test suite.
"""

import pytest


@pytest.fixture
def clump_genome():
    """Sample genome with three 5-mers occurring four times within 75 bp."""
    return ("CGGACTCGACAGATGTGAAGAAATGTGAAGACTGAGTGAAGAGAAGAGGAAACACGACACGACATTGCGACATAATGTACGAATGTAATGTGCCTATGGC")


@pytest.fixture
def vibrio_ori():
    """Fragment of the Vibrio cholerae replication origin."""
    return ("ATCAATGATCAACGTAAGCTTCTAAGCATGATCAAGGTGCTCACACAGTTTATCCACAACCTGAGTGGATGACATCAAGATAGGTCGTTGTATCTCCTTCCTCTCG"
            "TACTCTCATGACCACGGAAAGATGATCAAGAGAGGATGATTTCTTGGCCATATCGCAATGAATACTTGTGACTTGTGCTTCCAATTGACATCTTCAGCGCCATATT"
            "GCGCTGGCCAAGGTGACGGAGCGGGATTACGAAAGCATGATCATGGCTGTTGTTCTGTTTATCTTGTTTTGACTGAGACTTGTTAGGATAGACGGTTTTTCATCAC"
            "TGACTAGCCAAAGCCTTACTCTGCCTGACATCGACCGTAAATTGATAATGAATTTACATGCTTCCGCGACGATTTACCTCTTGATCATCGATCCGATTGAAGATC"
            "TTCAATTGTTAATTCTCTTGCCTCGACTCATAGCCATGATGAGCTCTTGATCATGTTTCCTTAACCCTCTATTTTTTACGGAAGAATGATCAAGCTGCTGCTCTT"
            "GATCATCGTTTC")


@pytest.fixture
def sequence_file(tmp_path):
    def write(content, name="sequence.fa"):
        path = tmp_path / name
        path.write_text(content)
        return str(path)
    return write
