# trusted_setup/verify.py

"""
Verify every contribution of the ceremony against the initial setup.

1. Checks the environment and resolves the ptau (public parameters) file.
2. Makes sure the initial setup and the contributions are available
   locally, downloading them from S3 when needed.
3. Runs `snarkjs zkey verifyfrominit` for each circuit of each contribution.
4. Prints a summary table of PASS / FAIL / N/A per contribution and circuit.
"""

import sys
import argparse
import logging

from .utils.config import CONFIG_PATH, check_required_env_vars, load_config
from .utils.ptau_utils import resolve_public_params_path
from .utils.storage_utils import ensure_all_contributions_available, ensure_baseline_available
from .verification.chain import ChainDriver
from .verification.exceptions import ArtifactNotFoundError, SetupError
from .verification.locator import find_circuit_description
from .verification.report import build_report, print_report
from .verification.verifier import SnarkjsVerifier

logger = logging.getLogger(__name__)

EXIT_SETUP_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


def build_parser():
    parser = argparse.ArgumentParser(description="Verify trusted setup contributions")
    parser.add_argument("--config", type=str, default=CONFIG_PATH, help="Path to the ceremony YAML configuration.")
    parser.add_argument("--root", type=str, default=None, help="Contribution root folder (overrides the configuration).")
    parser.add_argument("--no-sync", action="store_true", help="Use local files only, never talk to S3.")
    parser.add_argument(
        "--fail-on-error",
        action="store_true",
        help="Exit with status 2 when any verification fails or a contribution is skipped."
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser


def prepare(config):
    """Setup phase. Anything raised here aborts the run before verification starts."""
    check_required_env_vars(config)
    ptau_file = resolve_public_params_path(config)
    logger.info(f"Using ptau file: {ptau_file}")

    ensure_baseline_available(config)
    try:
        r1cs = find_circuit_description(config.contribution_root, config.baseline_folder, config.circuit_extension)
        logger.info(f"Circuit description: {r1cs}")
    except ArtifactNotFoundError as e:
        logger.warning(str(e))

    folders = ensure_all_contributions_available(config)
    if folders and folders[0] != config.baseline_folder:
        logger.warning(f"First contribution folder is {folders[0]}, expected {config.baseline_folder}")
    return ptau_file, folders


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        config = load_config(args.config)
        if args.root:
            config.contribution_root = args.root
        if args.no_sync:
            config.sync_enabled = False
        ptau_file, folders = prepare(config)
    except (SetupError, OSError, ValueError) as e:
        logger.error(f"Error: {e}")
        return EXIT_SETUP_ERROR

    if len(folders) < 2:
        print("At least two contributions are needed for verification.")
        print("There's only the initial setup folder. Nothing to verify yet.")
        return 0

    verifier = SnarkjsVerifier(config.verifier_command, config.node_max_old_space_mb)
    driver = ChainDriver(config.contribution_root, verifier, config.artifact_extension)
    outcomes = driver.run_verification(folders, ptau_file)

    report = build_report(outcomes, driver.skipped_folders)
    print_report(report)

    if args.fail_on_error and not report.all_passed:
        return EXIT_VERIFICATION_FAILED
    return 0


if __name__ == "__main__":
    sys.exit(main())
