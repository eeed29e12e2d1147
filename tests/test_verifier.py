# tests/test_verifier.py

import unittest
import subprocess
import sys
import os
from unittest.mock import patch

# Adjust import according to the project structure
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from trusted_setup.verification.verifier import SnarkjsVerifier, Verifier


class TestSnarkjsVerifier(unittest.TestCase):

    def setUp(self):
        self.verifier = SnarkjsVerifier(env={"PATH": "/usr/bin"})

    @patch("trusted_setup.verification.verifier.subprocess.run")
    def test_success(self, mock_run):
        """Exit status 0 is a successful verification."""
        mock_run.return_value = subprocess.CompletedProcess(args=[], returncode=0)
        result = self.verifier.verify("init/a.zkey", "pot.ptau", "alice/a.zkey")

        self.assertTrue(result.success)
        self.assertIsNone(result.error_message)
        args, kwargs = mock_run.call_args
        self.assertEqual(
            args[0],
            ["snarkjs", "zkey", "verifyfrominit", "init/a.zkey", "pot.ptau", "alice/a.zkey"]
        )
        self.assertTrue(kwargs["check"])
        self.assertNotIn("capture_output", kwargs)
        self.assertEqual(kwargs["env"]["NODE_OPTIONS"], "--max-old-space-size=8192")

    @patch("trusted_setup.verification.verifier.subprocess.run")
    def test_non_zero_exit(self, mock_run):
        """A non-zero exit becomes a failure carrying the exception text."""
        mock_run.side_effect = subprocess.CalledProcessError(1, ["snarkjs"])
        result = self.verifier.verify("init/a.zkey", "pot.ptau", "alice/a.zkey")
        self.assertFalse(result.success)
        self.assertIn("non-zero exit status 1", result.error_message)

    @patch("trusted_setup.verification.verifier.subprocess.run")
    def test_spawn_failure(self, mock_run):
        """A missing executable is a failure, not an exception."""
        mock_run.side_effect = FileNotFoundError(2, "No such file or directory", "snarkjs")
        result = self.verifier.verify("init/a.zkey", "pot.ptau", "alice/a.zkey")
        self.assertFalse(result.success)
        self.assertIn("No such file or directory", result.error_message)

    @patch("trusted_setup.verification.verifier.subprocess.run")
    def test_spawn_failure_without_message(self, mock_run):
        mock_run.side_effect = OSError()
        result = self.verifier.verify("init/a.zkey", "pot.ptau", "alice/a.zkey")
        self.assertEqual(result.error_message, "Unknown error")

    def test_custom_command_and_node_options(self):
        verifier = SnarkjsVerifier(
            command=["node", "snarkjs.js", "zkvi"],
            node_max_old_space_mb=4096,
            env={"NODE_OPTIONS": "--trace-warnings"}
        )
        self.assertEqual(verifier.build_command("a", "b", "c"), ["node", "snarkjs.js", "zkvi", "a", "b", "c"])
        self.assertEqual(verifier.build_env()["NODE_OPTIONS"], "--trace-warnings --max-old-space-size=4096")

    def test_memory_limit_disabled(self):
        verifier = SnarkjsVerifier(node_max_old_space_mb=None, env={})
        self.assertNotIn("NODE_OPTIONS", verifier.build_env())

    def test_base_verifier_is_abstract(self):
        with self.assertRaises(NotImplementedError):
            Verifier().verify("a", "b", "c")


if __name__ == '__main__':
    unittest.main()
