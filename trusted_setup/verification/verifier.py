# trusted_setup/verification/verifier.py

"""
Adapters around the external contribution verifier.

The chain driver only talks to the `Verifier` interface. `SnarkjsVerifier`
is the production adapter: it runs `snarkjs zkey verifyfrominit` once per
artifact pair and lets the tool write straight to the terminal, since a
single verification can take minutes and several gigabytes of memory.
"""

import os
import time
import logging
import subprocess
from typing import List, Optional, Sequence

from .models import VerifierResult, UNKNOWN_ERROR_MESSAGE

logger = logging.getLogger(__name__)

DEFAULT_VERIFIER_COMMAND = ["snarkjs", "zkey", "verifyfrominit"]
DEFAULT_NODE_MAX_OLD_SPACE_MB = 8192


class Verifier:
    """Checks that `current_path` was correctly derived from `baseline_path`."""

    def verify(self, baseline_path: str, public_params_path: str, current_path: str) -> VerifierResult:
        raise NotImplementedError


class SnarkjsVerifier(Verifier):
    def __init__(
        self,
        command: Optional[Sequence[str]] = None,
        node_max_old_space_mb: Optional[int] = DEFAULT_NODE_MAX_OLD_SPACE_MB,
        env: Optional[dict] = None
    ):
        self.command = list(command or DEFAULT_VERIFIER_COMMAND)
        self.node_max_old_space_mb = node_max_old_space_mb
        self.env = env

    def build_command(self, baseline_path, public_params_path, current_path) -> List[str]:
        return self.command + [baseline_path, public_params_path, current_path]

    def build_env(self) -> dict:
        env = dict(self.env if self.env is not None else os.environ)
        if self.node_max_old_space_mb:
            node_options = env.get("NODE_OPTIONS", "")
            env["NODE_OPTIONS"] = f"{node_options} --max-old-space-size={self.node_max_old_space_mb}".strip()
        return env

    def verify(self, baseline_path, public_params_path, current_path) -> VerifierResult:
        artifact = os.path.basename(current_path)
        cmd = self.build_command(baseline_path, public_params_path, current_path)
        logger.info(f"Verifying {artifact} using initial zkey file...")
        logger.debug(f"Command: {' '.join(cmd)}")

        start = time.time()
        try:
            # stdio inherited so the operator sees snarkjs progress live
            subprocess.run(cmd, check=True, env=self.build_env())
        except subprocess.CalledProcessError as e:
            logger.error(f"❌ Failed to verify {artifact}")
            logger.error(str(e))
            return VerifierResult(success=False, error_message=str(e) or UNKNOWN_ERROR_MESSAGE)
        except OSError as e:
            logger.error(f"❌ Failed to verify {artifact}: could not start {cmd[0]}")
            logger.error(str(e))
            return VerifierResult(success=False, error_message=str(e) or UNKNOWN_ERROR_MESSAGE)

        elapsed = time.time() - start
        logger.info(f"✅ {artifact} verification successful! ({elapsed:.2f}s)")
        return VerifierResult(success=True)
