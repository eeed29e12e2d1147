# trusted_setup/utils/ptau_utils.py

import os
import logging

import requests

from ..verification.exceptions import SetupError
from .config import CeremonyConfig

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024


def download_ptau(url, destination, timeout=60):
    """Stream a ptau file to `destination`. A partial download never lands under the final name."""
    partial = destination + ".part"
    os.makedirs(os.path.dirname(os.path.abspath(destination)), exist_ok=True)
    logger.info(f"Downloading ptau file from {url} to {destination}...")
    try:
        with requests.get(url, stream=True, timeout=timeout) as response:
            response.raise_for_status()
            with open(partial, 'wb') as f:
                for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                    if chunk:
                        f.write(chunk)
    except (requests.RequestException, OSError) as e:
        logger.error(f"Error during ptau download: {e}")
        if os.path.exists(partial):
            os.remove(partial)
        raise
    os.replace(partial, destination)
    logger.info("Ptau download complete!")
    return destination


def resolve_public_params_path(config: CeremonyConfig) -> str:
    ptau_file = config.ptau_file
    if os.path.isfile(ptau_file):
        return ptau_file

    if not config.ptau_url:
        raise SetupError(f"Ptau file not found: {ptau_file} (and no ptau url configured)")

    try:
        return download_ptau(config.ptau_url, ptau_file)
    except requests.RequestException as e:
        raise SetupError(f"Could not download ptau file from {config.ptau_url}: {e}") from e
