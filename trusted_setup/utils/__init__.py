# trusted_setup/utils/__init__.py

from .config import CeremonyConfig, load_config, check_required_env_vars
from .storage_utils import (
    download_from_s3,
    upload_to_s3,
    download_latest_contribution,
    ensure_baseline_available,
    ensure_all_contributions_available
)
from .ptau_utils import resolve_public_params_path
from .contribution_utils import contribute, next_folder_name

__all__ = [
    'CeremonyConfig', 'load_config', 'check_required_env_vars',
    'download_from_s3', 'upload_to_s3', 'download_latest_contribution',
    'ensure_baseline_available', 'ensure_all_contributions_available',
    'resolve_public_params_path', 'contribute', 'next_folder_name'
]
