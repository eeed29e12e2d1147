# trusted_setup/utils/storage_utils.py

"""
Synchronization of contribution folders with the ceremony S3 bucket.

Transfers go through the aws CLI, the same way the snarkjs steps go
through the snarkjs CLI. Sync problems are never fatal on their own: the
run carries on with whatever is available locally, and only a missing
baseline folder stops it.
"""

import os
import re
import shutil
import logging
import subprocess
from typing import List, Optional

from ..verification.exceptions import SetupError
from ..verification.locator import list_contribution_folders
from .config import CeremonyConfig

logger = logging.getLogger(__name__)

S3_FOLDER_PATTERN = re.compile(r"PRE\s+(\d{4}_[^/]*)/")


def is_aws_cli_available() -> bool:
    if shutil.which("aws") is None:
        return False
    try:
        subprocess.run(["aws", "--version"], check=True,
                       stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
        return True
    except (subprocess.CalledProcessError, OSError):
        return False


def run_aws_command(args: List[str], config: CeremonyConfig, capture: bool = False) -> Optional[str]:
    """
    Run `aws <args>` with the ceremony region/endpoint.

    Returns captured stdout (or an empty string when not capturing) on
    success, None on failure.
    """
    cmd = ["aws"] + args
    logger.debug(f"Command: {' '.join(cmd)}")
    try:
        result = subprocess.run(
            cmd,
            check=True,
            env=config.aws_env(),
            capture_output=capture,
            text=True
        )
    except (subprocess.CalledProcessError, OSError) as e:
        logger.warning(f"Command failed: {' '.join(cmd)}")
        logger.warning(str(e))
        return None
    return result.stdout if capture else ""


def _is_populated(path) -> bool:
    return os.path.isdir(path) and len(os.listdir(path)) > 0


def download_from_s3(config: CeremonyConfig, prefix: Optional[str] = None) -> bool:
    s3_path = f"{config.s3_bucket}/{prefix}" if prefix else config.s3_bucket
    local_path = config.folder_path(prefix) if prefix else config.contribution_root
    os.makedirs(local_path, exist_ok=True)

    if not is_aws_cli_available():
        logger.warning("AWS CLI not available. Skipping S3 download.")
        return False

    logger.info(f"Downloading files from {s3_path} to {local_path}...")
    if run_aws_command(["s3", "cp", s3_path, local_path, "--recursive"], config) is None:
        logger.warning("S3 download was not successful. Proceeding with local files only.")
        return False
    logger.info("Download complete!")
    return True


def upload_to_s3(config: CeremonyConfig, folder_name: str) -> bool:
    if not is_aws_cli_available():
        logger.warning("AWS CLI not available. Skipping S3 upload.")
        return False

    local_path = config.folder_path(folder_name)
    if not os.path.isdir(local_path):
        logger.error(f"Folder not found: {local_path}")
        raise FileNotFoundError(f"Folder does not exist: {local_path}")

    s3_path = f"{config.s3_bucket}/{folder_name}"
    logger.info(f"Uploading files from {local_path} to {s3_path}...")
    if run_aws_command(["s3", "cp", local_path, s3_path, "--recursive"], config) is None:
        logger.warning("S3 upload was not successful.")
        return False
    logger.info("Upload complete!")
    return True


def list_remote_contribution_folders(config: CeremonyConfig) -> List[str]:
    output = run_aws_command(["s3", "ls", f"{config.s3_bucket}/"], config, capture=True)
    if not output:
        return []
    return sorted(set(S3_FOLDER_PATTERN.findall(output)))


def download_latest_contribution(config: CeremonyConfig) -> Optional[str]:
    """Fetch the newest contribution folder in the bucket unless it is already local."""
    if not is_aws_cli_available():
        logger.warning("AWS CLI not available. Skipping S3 download check.")
        return None

    remote_folders = list_remote_contribution_folders(config)
    if not remote_folders:
        logger.info("No contribution folders found in S3 bucket or S3 access failed.")
        return None

    folder_name = remote_folders[-1]
    logger.info(f"Latest contribution folder in S3: {folder_name}")

    if _is_populated(config.folder_path(folder_name)):
        logger.info(f"Folder {folder_name} already exists locally. Skipping download.")
    elif not download_from_s3(config, folder_name):
        logger.warning(f"Could not download {folder_name} from S3. Will proceed with local files only.")
    return folder_name


def ensure_baseline_available(config: CeremonyConfig) -> None:
    os.makedirs(config.contribution_root, exist_ok=True)
    baseline_path = config.folder_path(config.baseline_folder)

    if _is_populated(baseline_path):
        logger.info("Initial setup folder already exists locally.")
        return

    if config.sync_enabled:
        logger.info("Initial setup folder not found locally. Attempting to download from S3...")
        download_from_s3(config, config.baseline_folder)

    if not _is_populated(baseline_path):
        raise SetupError(
            f"Initial setup folder {baseline_path} is missing or empty. "
            f"Provide it locally or configure access to {config.s3_bucket}."
        )


def ensure_all_contributions_available(config: CeremonyConfig) -> List[str]:
    """Download the whole bucket when nothing beyond the baseline is local; return the ordered folders."""
    os.makedirs(config.contribution_root, exist_ok=True)
    local_folders = list_contribution_folders(config.contribution_root)

    if config.sync_enabled:
        if len(local_folders) <= 1:
            logger.info("Only initial setup found locally. Downloading all contributions from S3...")
            download_from_s3(config)
        else:
            logger.info(
                f"Found {len(local_folders)} local contribution folders. Using already downloaded "
                f"contributions. Delete the contributions folder and run again to fetch the latest."
            )

    folders = list_contribution_folders(config.contribution_root)
    logger.info(f"Found {len(folders)} contributions")
    return folders
