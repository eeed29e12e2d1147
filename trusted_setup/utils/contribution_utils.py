# trusted_setup/utils/contribution_utils.py

import os
import re
import shutil
import secrets
import logging
import subprocess
from typing import List, Optional, Sequence

from ..verification.exceptions import NoArtifactsError, SetupError
from ..verification.locator import list_artifacts, list_contribution_folders, parse_ordinal
from .config import CeremonyConfig

logger = logging.getLogger(__name__)

LABEL_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_-]+")


def sanitize_label(label) -> str:
    return LABEL_UNSAFE_CHARS.sub("_", label.strip()).strip("_")


def next_folder_name(folders: Sequence[str], label: str) -> str:
    clean = sanitize_label(label)
    if not clean:
        raise ValueError(f"Contribution name '{label}' has no usable characters")
    next_ordinal = max((parse_ordinal(f) for f in folders), default=-1) + 1
    if next_ordinal > 9999:
        raise ValueError("Ordinal space exhausted: a ceremony holds at most 10000 folders")
    return f"{next_ordinal:04d}_{clean}"


def contribute_command(previous_zkey, next_zkey, label, entropy) -> List[str]:
    return ["snarkjs", "zkey", "contribute", previous_zkey, next_zkey, f"--name={label}", f"-e={entropy}"]


def contribute(config: CeremonyConfig, label: str, entropy: Optional[str] = None) -> str:
    """
    Add a contribution on top of the latest folder and return the new folder name.

    Every artifact of the latest folder gets one `snarkjs zkey contribute`
    call. The new folder is removed if any of them fails.
    """
    folders = list_contribution_folders(config.contribution_root)
    if not folders:
        raise SetupError(f"No contribution folders under {config.contribution_root}; the baseline is required")

    previous = folders[-1]
    artifacts = sorted(list_artifacts(config.folder_path(previous), config.artifact_extension))
    if not artifacts:
        raise NoArtifactsError(previous, config.artifact_extension)

    new_folder = next_folder_name(folders, label)
    new_path = config.folder_path(new_folder)
    os.makedirs(new_path)
    entropy = entropy or secrets.token_hex(32)

    logger.info(f"Contributing on top of {previous} into {new_folder}...")
    try:
        for artifact in artifacts:
            cmd = contribute_command(
                os.path.join(config.folder_path(previous), artifact),
                os.path.join(new_path, artifact),
                label,
                entropy
            )
            logger.info(f"=== Contribute to {artifact} ===")
            subprocess.run(cmd, check=True)
    except (subprocess.CalledProcessError, OSError):
        logger.error(f"Contribution failed, removing {new_path}")
        shutil.rmtree(new_path, ignore_errors=True)
        raise

    logger.info(f"✅ Contribution {new_folder} completed")
    return new_folder
