# trusted_setup/utils/config.py

import os
import logging
from dataclasses import dataclass, field
from typing import List, Optional

import yaml

from ..verification.exceptions import SetupError
from ..verification.verifier import DEFAULT_NODE_MAX_OLD_SPACE_MB, DEFAULT_VERIFIER_COMMAND

logger = logging.getLogger(__name__)

CONFIG_PATH = os.path.join(os.path.dirname(__file__), '..', 'config', 'ceremony_config.yaml')

REQUIRED_AWS_ENV_VARS = ["AWS_ACCESS_KEY_ID", "AWS_SECRET_ACCESS_KEY"]


@dataclass
class CeremonyConfig:
    """Settings shared by the verification run and its storage/ptau collaborators."""
    contribution_root: str = "./contributions"
    baseline_folder: str = "0000_initial"
    artifact_extension: str = ".zkey"
    circuit_extension: str = ".r1cs"
    s3_bucket: str = "s3://pp-trusted-test"
    aws_region: str = "us-east-2"
    aws_endpoint: Optional[str] = None
    sync_enabled: bool = True
    ptau_file: str = "./powersOfTau28_hez_final_18.ptau"
    ptau_url: Optional[str] = None
    verifier_command: List[str] = field(default_factory=lambda: list(DEFAULT_VERIFIER_COMMAND))
    node_max_old_space_mb: int = DEFAULT_NODE_MAX_OLD_SPACE_MB

    def __post_init__(self):
        self.s3_bucket = self.s3_bucket.rstrip("/")
        if not self.aws_endpoint:
            self.aws_endpoint = f"https://s3.{self.aws_region}.amazonaws.com"

    @property
    def bucket_name(self) -> str:
        return self.s3_bucket.replace("s3://", "", 1)

    def folder_path(self, folder_name) -> str:
        return os.path.join(self.contribution_root, folder_name)

    def aws_env(self, environ=None) -> dict:
        """Environment for aws CLI calls: the process env plus region and endpoint."""
        env = dict(os.environ if environ is None else environ)
        env["AWS_DEFAULT_REGION"] = self.aws_region
        env["AWS_ENDPOINT_URL"] = self.aws_endpoint
        return env


def load_config(config_path=CONFIG_PATH, environ=None) -> CeremonyConfig:
    """
    Load the ceremony configuration from YAML, then apply environment overrides.
    """
    if not os.path.isfile(config_path):
        logger.error(f"Configuration file not found at {config_path}")
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, 'r') as f:
        try:
            raw = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            logger.error(f"Invalid YAML in {config_path}")
            raise SetupError(f"Invalid configuration file {config_path}: {e}") from e
    if not isinstance(raw, dict):
        raise SetupError(f"Invalid configuration file {config_path}: expected a mapping at the top level")

    environ = os.environ if environ is None else environ
    ceremony = raw.get('ceremony', {}) or {}
    storage = raw.get('storage', {}) or {}
    ptau = raw.get('ptau', {}) or {}
    verifier = raw.get('verifier', {}) or {}

    defaults = CeremonyConfig()
    aws_region = environ.get('AWS_DEFAULT_REGION') or storage.get('aws_region', defaults.aws_region)

    config = CeremonyConfig(
        contribution_root=environ.get('CONTRIBUTION_ROOT') or ceremony.get('contribution_root', defaults.contribution_root),
        baseline_folder=ceremony.get('baseline_folder', defaults.baseline_folder),
        artifact_extension=ceremony.get('artifact_extension', defaults.artifact_extension),
        circuit_extension=ceremony.get('circuit_extension', defaults.circuit_extension),
        s3_bucket=environ.get('S3BUCKET') or storage.get('s3_bucket', defaults.s3_bucket),
        aws_region=aws_region,
        aws_endpoint=environ.get('AWS_ENDPOINT_URL') or storage.get('aws_endpoint'),
        sync_enabled=bool(storage.get('sync_enabled', defaults.sync_enabled)),
        ptau_file=environ.get('PTAU_FILE') or ptau.get('file', defaults.ptau_file),
        ptau_url=environ.get('PTAU_URL') or ptau.get('url'),
        verifier_command=list(verifier.get('command') or defaults.verifier_command),
        node_max_old_space_mb=int(verifier.get('node_max_old_space_mb', defaults.node_max_old_space_mb)),
    )
    logger.debug(f"Loaded configuration: {config}")
    return config


def check_required_env_vars(config: CeremonyConfig, environ=None) -> None:
    """AWS credentials must be present whenever storage sync is enabled."""
    if not config.sync_enabled:
        return
    environ = os.environ if environ is None else environ
    missing = [name for name in REQUIRED_AWS_ENV_VARS if not environ.get(name)]
    if missing:
        logger.error(f"Missing required environment variables: {', '.join(missing)}")
        raise SetupError(
            f"Missing required environment variables: {', '.join(missing)}. "
            f"Set them in your environment or run with --no-sync to use local files only."
        )
