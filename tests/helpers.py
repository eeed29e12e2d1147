# tests/helpers.py

import os

from trusted_setup.verification.verifier import Verifier
from trusted_setup.verification.models import VerifierResult


def make_folder(root, name, files=()):
    path = os.path.join(root, name)
    os.makedirs(path, exist_ok=True)
    for file_name in files:
        with open(os.path.join(path, file_name), 'wb') as f:
            f.write(b"zkey")
    return path


class FakeVerifier(Verifier):
    """Canned verifier keyed by (folder, file name) of the contribution artifact."""

    def __init__(self, failures=None, raises=None):
        self.failures = failures or {}
        self.raises = raises or {}
        self.calls = []

    def verify(self, baseline_path, public_params_path, current_path):
        self.calls.append((baseline_path, public_params_path, current_path))
        key = (os.path.basename(os.path.dirname(current_path)), os.path.basename(current_path))
        if key in self.raises:
            raise self.raises[key]
        if key in self.failures:
            return VerifierResult(success=False, error_message=self.failures[key])
        return VerifierResult(success=True)
