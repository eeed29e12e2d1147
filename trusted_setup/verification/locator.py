# trusted_setup/verification/locator.py

import os
import re
import logging
from typing import List

from .exceptions import ArtifactNotFoundError, MalformedFolderNameError

logger = logging.getLogger(__name__)

ARTIFACT_EXTENSION = ".zkey"
CIRCUIT_EXTENSION = ".r1cs"

# NNNN_label, e.g. 0000_initial or 0001_alice
CONTRIBUTION_FOLDER_PATTERN = re.compile(r"^(?P<ordinal>\d{4})_(?P<label>.+)$")
ORDINAL_PREFIX = re.compile(r"^\d{4}_")


def list_artifacts(folder, extension=ARTIFACT_EXTENSION) -> List[str]:
    """
    List the file names in `folder` ending with `extension`.

    Order follows the directory listing and is not guaranteed; sort the
    result where a deterministic order matters.
    """
    if not os.path.isdir(folder):
        logger.error(f"Contribution folder not found: {folder}")
        raise ArtifactNotFoundError(f"Folder does not exist or is not a directory: {folder}")
    return [name for name in os.listdir(folder) if name.endswith(extension)]


def circuit_name_of(file_name, extension=ARTIFACT_EXTENSION) -> str:
    if file_name.endswith(extension):
        return file_name[:-len(extension)]
    return file_name


def parse_ordinal(folder_name) -> int:
    match = CONTRIBUTION_FOLDER_PATTERN.match(folder_name)
    if not match:
        raise MalformedFolderNameError(folder_name)
    return int(match.group("ordinal"))


def get_directories(source) -> List[str]:
    return [entry.name for entry in os.scandir(source) if entry.is_dir()]


def list_contribution_folders(root) -> List[str]:
    """
    List the contribution folders under `root` in ceremony order.

    Directories without a four digit `NNNN_` prefix are skipped (with a
    warning when they start with a digit, e.g. a stray `2024-backup`). A
    directory with the prefix but no label, such as `0001_`, raises
    MalformedFolderNameError rather than being mis-sorted. Folders are ordered
    by their parsed ordinal, ties broken by full name, which for the fixed
    four digit prefix is identical to lexical order.
    """
    if not os.path.isdir(root):
        logger.error(f"Contribution root not found: {root}")
        raise ArtifactNotFoundError(f"Contribution root does not exist: {root}")

    folders = []
    for name in get_directories(root):
        if not ORDINAL_PREFIX.match(name):
            if name[:1].isdigit():
                logger.warning(f"Ignoring directory {name}: not a NNNN_label contribution folder")
            else:
                logger.debug(f"Ignoring non-contribution directory {name}")
            continue
        folders.append((parse_ordinal(name), name))

    folders.sort()
    return [name for _, name in folders]


def find_circuit_description(root, baseline_folder, extension=CIRCUIT_EXTENSION) -> str:
    """Return the path (relative to `root`) of the circuit description in the baseline folder."""
    candidates = sorted(list_artifacts(os.path.join(root, baseline_folder), extension))
    if not candidates:
        raise ArtifactNotFoundError(f"No {extension} files found in {baseline_folder}")
    if len(candidates) > 1:
        logger.warning(f"Several {extension} files in {baseline_folder}, using {candidates[0]}")
    return os.path.join(baseline_folder, candidates[0])
