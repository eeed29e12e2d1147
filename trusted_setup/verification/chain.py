# trusted_setup/verification/chain.py

import logging
from typing import List, Sequence

from .exceptions import NoArtifactsError
from .locator import ARTIFACT_EXTENSION
from .matcher import match_artifacts
from .models import (
    MISSING_BASELINE_MESSAGE,
    UNKNOWN_ERROR_MESSAGE,
    ArtifactPair,
    SkippedFolder,
    VerificationOutcome,
)
from .verifier import Verifier

logger = logging.getLogger(__name__)


class ChainDriver:
    """
    Verifies every contribution folder against the baseline folder.

    Folders and artifacts are processed strictly one after another: the
    external verifier needs the host's memory to itself. Whatever goes wrong
    for one folder or artifact is recorded and the run moves on, so the
    caller always gets a complete picture of the chain.
    """

    def __init__(self, root: str, verifier: Verifier, extension: str = ARTIFACT_EXTENSION):
        self.root = root
        self.verifier = verifier
        self.extension = extension
        self.skipped_folders: List[SkippedFolder] = []

    def run_verification(self, ordered_folders: Sequence[str], public_params_path: str) -> List[VerificationOutcome]:
        self.skipped_folders = []
        outcomes: List[VerificationOutcome] = []

        if len(ordered_folders) < 2:
            logger.info("At least two contributions are needed for verification. Nothing to verify yet.")
            return outcomes

        baseline = ordered_folders[0]
        for folder in ordered_folders[1:]:
            outcomes.extend(self.verify_folder(folder, baseline, public_params_path))
        return outcomes

    def verify_folder(self, folder: str, baseline: str, public_params_path: str) -> List[VerificationOutcome]:
        logger.info(f"Verifying contributions in {folder}...")
        try:
            matches = match_artifacts(self.root, folder, baseline, self.extension)
        except (NoArtifactsError, OSError) as e:
            logger.error(str(e))
            self.skipped_folders.append(SkippedFolder(folder=folder, reason=str(e)))
            return []

        outcomes = []
        for match in matches:
            if not isinstance(match, ArtifactPair):
                outcomes.append(VerificationOutcome(
                    contribution_folder=folder,
                    circuit_name=match.circuit_name,
                    success=False,
                    error_message=MISSING_BASELINE_MESSAGE,
                ))
                continue
            outcomes.append(self.verify_pair(folder, match, public_params_path))
        return outcomes

    def verify_pair(self, folder: str, pair: ArtifactPair, public_params_path: str) -> VerificationOutcome:
        try:
            result = self.verifier.verify(pair.baseline_path, public_params_path, pair.current_path)
        except Exception as e:  # one broken verifier call must not end the run
            logger.exception(f"Verifier raised while checking {pair.current_path}")
            return VerificationOutcome(
                contribution_folder=folder,
                circuit_name=pair.circuit_name,
                success=False,
                error_message=str(e) or UNKNOWN_ERROR_MESSAGE,
            )

        return VerificationOutcome(
            contribution_folder=folder,
            circuit_name=pair.circuit_name,
            success=result.success,
            error_message=None if result.success else (result.error_message or UNKNOWN_ERROR_MESSAGE),
        )
