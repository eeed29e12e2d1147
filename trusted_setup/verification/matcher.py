# trusted_setup/verification/matcher.py

import os
import logging
from typing import List, Union

from .exceptions import NoArtifactsError
from .locator import ARTIFACT_EXTENSION, circuit_name_of, list_artifacts
from .models import ArtifactPair, UnmatchedArtifact

logger = logging.getLogger(__name__)


def match_artifacts(
    root: str,
    current_folder: str,
    baseline_folder: str,
    extension: str = ARTIFACT_EXTENSION
) -> List[Union[ArtifactPair, UnmatchedArtifact]]:
    """
    Align every artifact of `current_folder` with the baseline artifact of
    the identical file name.

    The current folder drives the iteration: a baseline artifact missing
    from the current folder yields nothing, while a current artifact with no
    baseline counterpart yields an UnmatchedArtifact. Raises
    NoArtifactsError when either folder holds no artifacts at all.
    """
    current_files = sorted(list_artifacts(os.path.join(root, current_folder), extension))
    if not current_files:
        raise NoArtifactsError(current_folder, extension)

    baseline_files = set(list_artifacts(os.path.join(root, baseline_folder), extension))
    if not baseline_files:
        raise NoArtifactsError(baseline_folder, extension)

    matches = []
    for file_name in current_files:
        circuit_name = circuit_name_of(file_name, extension)
        if file_name not in baseline_files:
            logger.error(f"❌ Could not find matching initial zkey file for {file_name}")
            matches.append(UnmatchedArtifact(circuit_name=circuit_name, folder=current_folder))
            continue
        matches.append(ArtifactPair(
            circuit_name=circuit_name,
            current_path=os.path.join(root, current_folder, file_name),
            baseline_path=os.path.join(root, baseline_folder, file_name),
        ))
    return matches
