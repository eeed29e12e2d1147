# trusted_setup/verification/models.py

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

MISSING_BASELINE_MESSAGE = "Missing initial zkey file"
UNKNOWN_ERROR_MESSAGE = "Unknown error"


@dataclass(frozen=True)
class ArtifactPair:
    """A contribution artifact aligned with the baseline artifact of the same name."""
    circuit_name: str
    current_path: str
    baseline_path: str


@dataclass(frozen=True)
class UnmatchedArtifact:
    """An artifact in a contribution folder with no same-named baseline artifact."""
    circuit_name: str
    folder: str


@dataclass(frozen=True)
class VerifierResult:
    success: bool
    error_message: Optional[str] = None


@dataclass(frozen=True)
class VerificationOutcome:
    """Result of verifying one circuit of one contribution folder."""
    contribution_folder: str
    circuit_name: str
    success: bool
    error_message: Optional[str] = None

    def __post_init__(self):
        if self.success and self.error_message is not None:
            raise ValueError("A successful outcome cannot carry an error message")
        if not self.success and self.error_message is None:
            object.__setattr__(self, "error_message", UNKNOWN_ERROR_MESSAGE)


@dataclass(frozen=True)
class SkippedFolder:
    folder: str
    reason: str


class CellStatus(Enum):
    PASS = "PASS"
    FAIL = "FAIL"
    NOT_APPLICABLE = "N/A"


@dataclass
class VerificationReport:
    """Outcomes grouped by folder (rows) and circuit (columns), plus totals."""
    folders: List[str] = field(default_factory=list)
    circuits: List[str] = field(default_factory=list)
    cells: Dict[Tuple[str, str], CellStatus] = field(default_factory=dict)
    total_tests: int = 0
    passed_tests: int = 0
    failed_tests: int = 0
    failures: List[VerificationOutcome] = field(default_factory=list)
    skipped_folders: List[SkippedFolder] = field(default_factory=list)

    def cell(self, folder: str, circuit_name: str) -> CellStatus:
        return self.cells.get((folder, circuit_name), CellStatus.NOT_APPLICABLE)

    def row(self, folder: str) -> List[CellStatus]:
        return [self.cell(folder, circuit) for circuit in self.circuits]

    @property
    def all_passed(self) -> bool:
        return self.failed_tests == 0 and not self.skipped_folders
