# tests/test_matcher.py

import unittest
import tempfile
import sys
import os

# Adjust import according to the project structure
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from trusted_setup.verification.matcher import match_artifacts
from trusted_setup.verification.models import ArtifactPair, UnmatchedArtifact
from trusted_setup.verification.exceptions import NoArtifactsError
from tests.helpers import make_folder


class TestMatchArtifacts(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.root = self.tmp.name

    def tearDown(self):
        self.tmp.cleanup()

    def test_current_folder_drives_matching(self):
        """Baseline {A, B} vs current {A, C}: A is paired, C is unmatched, B yields nothing."""
        make_folder(self.root, "0000_initial", ["A.zkey", "B.zkey"])
        make_folder(self.root, "0001_alice", ["A.zkey", "C.zkey"])

        matches = match_artifacts(self.root, "0001_alice", "0000_initial")

        self.assertEqual(len(matches), 2)
        self.assertEqual(matches[0], ArtifactPair(
            circuit_name="A",
            current_path=os.path.join(self.root, "0001_alice", "A.zkey"),
            baseline_path=os.path.join(self.root, "0000_initial", "A.zkey"),
        ))
        self.assertEqual(matches[1], UnmatchedArtifact(circuit_name="C", folder="0001_alice"))
        self.assertNotIn("B", [m.circuit_name for m in matches])

    def test_exact_file_name_match(self):
        """Same circuit with a different file name is not a match."""
        make_folder(self.root, "0000_initial", ["A_0000.zkey"])
        make_folder(self.root, "0001_alice", ["A_0001.zkey"])
        matches = match_artifacts(self.root, "0001_alice", "0000_initial")
        self.assertIsInstance(matches[0], UnmatchedArtifact)

    def test_empty_current_folder(self):
        make_folder(self.root, "0000_initial", ["A.zkey"])
        make_folder(self.root, "0001_alice", ["README.md"])
        with self.assertRaises(NoArtifactsError) as ctx:
            match_artifacts(self.root, "0001_alice", "0000_initial")
        self.assertEqual(ctx.exception.folder_name, "0001_alice")

    def test_empty_baseline_folder(self):
        make_folder(self.root, "0000_initial", ["circuit.r1cs"])
        make_folder(self.root, "0001_alice", ["A.zkey"])
        with self.assertRaises(NoArtifactsError) as ctx:
            match_artifacts(self.root, "0001_alice", "0000_initial")
        self.assertEqual(ctx.exception.folder_name, "0000_initial")


if __name__ == '__main__':
    unittest.main()
