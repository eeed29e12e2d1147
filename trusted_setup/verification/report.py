# trusted_setup/verification/report.py

from typing import Iterable, List, Sequence

from .models import CellStatus, SkippedFolder, VerificationOutcome, VerificationReport

MIN_FOLDER_WIDTH = 20
MIN_CIRCUIT_WIDTH = 15

CELL_LABELS = {
    CellStatus.PASS: "✅ PASS",
    CellStatus.FAIL: "❌ FAIL",
    CellStatus.NOT_APPLICABLE: "⚠️ N/A",
}


def build_report(
    outcomes: Sequence[VerificationOutcome],
    skipped_folders: Iterable[SkippedFolder] = ()
) -> VerificationReport:
    """
    Group outcomes into a folder x circuit table.

    Rows keep the order in which folders first appear in `outcomes`;
    columns are the distinct circuit names sorted lexically. A cell with no
    outcome is NOT_APPLICABLE. Pure: no I/O, same input gives the same report.
    """
    report = VerificationReport(skipped_folders=list(skipped_folders))

    for outcome in outcomes:
        if outcome.contribution_folder not in report.folders:
            report.folders.append(outcome.contribution_folder)
        key = (outcome.contribution_folder, outcome.circuit_name)
        report.cells[key] = CellStatus.PASS if outcome.success else CellStatus.FAIL
        if not outcome.success:
            report.failures.append(outcome)

    report.circuits = sorted({outcome.circuit_name for outcome in outcomes})
    report.total_tests = len(outcomes)
    report.failed_tests = len(report.failures)
    report.passed_tests = report.total_tests - report.failed_tests
    return report


def render_report(report: VerificationReport) -> str:
    lines: List[str] = ["", "", "=== VERIFICATION SUMMARY ===", ""]

    folder_width = max([MIN_FOLDER_WIDTH] + [len(f) for f in report.folders])
    circuit_width = max([MIN_CIRCUIT_WIDTH] + [len(c) for c in report.circuits])

    lines.append(" | ".join(["Contribution".ljust(folder_width)] + [c.ljust(circuit_width) for c in report.circuits]))
    lines.append(" | ".join(["-" * folder_width] + ["-" * circuit_width for _ in report.circuits]))
    for folder in report.folders:
        cells = [CELL_LABELS[status].ljust(circuit_width) for status in report.row(folder)]
        lines.append(" | ".join([folder.ljust(folder_width)] + cells))

    lines.append("")
    lines.append("=== OVERALL RESULTS ===")
    lines.append(f"Total verification tests: {report.total_tests}")
    lines.append(f"Passed: {report.passed_tests}")
    lines.append(f"Failed: {report.failed_tests}")

    if report.failures:
        lines.append("")
        lines.append("=== FAILED VERIFICATIONS ===")
        for outcome in report.failures:
            message = outcome.error_message or "Verification failed"
            lines.append(f"❌ {outcome.contribution_folder} - {outcome.circuit_name}: {message}")

    if report.skipped_folders:
        lines.append("")
        lines.append("=== SKIPPED CONTRIBUTIONS ===")
        for skipped in report.skipped_folders:
            lines.append(f"⚠️ {skipped.folder}: {skipped.reason}")

    return "\n".join(lines)


def print_report(report: VerificationReport) -> None:
    print(render_report(report))
