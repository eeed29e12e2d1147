# trusted_setup/verification/__init__.py

from .exceptions import (
    ArtifactNotFoundError,
    MalformedFolderNameError,
    NoArtifactsError,
    SetupError
)
from .models import (
    ArtifactPair,
    UnmatchedArtifact,
    VerifierResult,
    VerificationOutcome,
    VerificationReport,
    SkippedFolder,
    CellStatus
)
from .locator import list_artifacts, list_contribution_folders, find_circuit_description
from .matcher import match_artifacts
from .verifier import Verifier, SnarkjsVerifier
from .chain import ChainDriver
from .report import build_report, render_report, print_report
