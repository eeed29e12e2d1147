# trusted_setup/contribute.py

"""
Add one contribution to the ceremony without any interactive prompt.

Fetches the initial setup and the latest contribution, runs
`snarkjs zkey contribute` for every circuit into the next NNNN_<name>
folder and uploads that folder to S3.
"""

import sys
import argparse
import logging
import subprocess

from .utils.config import CONFIG_PATH, check_required_env_vars, load_config
from .utils.contribution_utils import contribute
from .utils.storage_utils import download_latest_contribution, ensure_baseline_available, upload_to_s3
from .verification.exceptions import NoArtifactsError, SetupError

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(description="Contribute to the trusted setup ceremony")
    parser.add_argument("--name", type=str, required=True, help="Contributor name, used as the folder label.")
    parser.add_argument("--entropy", type=str, default=None, help="Extra entropy; random when omitted.")
    parser.add_argument("--config", type=str, default=CONFIG_PATH, help="Path to the ceremony YAML configuration.")
    parser.add_argument("--root", type=str, default=None, help="Contribution root folder (overrides the configuration).")
    parser.add_argument("--no-sync", action="store_true", help="Use local files only, never talk to S3.")
    parser.add_argument("--no-upload", action="store_true", help="Do not upload the new contribution.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        config = load_config(args.config)
        if args.root:
            config.contribution_root = args.root
        if args.no_sync:
            config.sync_enabled = False

        check_required_env_vars(config)
        ensure_baseline_available(config)
        if config.sync_enabled:
            download_latest_contribution(config)

        new_folder = contribute(config, args.name, args.entropy)
    except (SetupError, NoArtifactsError, OSError, ValueError, subprocess.CalledProcessError) as e:
        logger.error(f"Error: {e}")
        return 1

    if config.sync_enabled and not args.no_upload:
        if not upload_to_s3(config, new_folder):
            logger.warning(f"Upload {config.folder_path(new_folder)} to {config.s3_bucket} manually.")

    print(f"Contribution {new_folder} created.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
