"""
Human-readable summaries of a RunReport.

Supports two modes:
    - DIALOG: Multi-line text for a message box
    - LOG: One line for a log file or console
"""

from enum import Enum

from rspnorm.model import RunReport, RunStatus


DIALOG_TITLE = "Update All Assemblies To C#11"

EMPTY_SELECTION_MESSAGE = "Select a folder (recursively scanned) or an .asmdef asset, then try again."
NO_DESCRIPTORS_MESSAGE = "No assembly definition (.asmdef) files found under the selection."


class SummaryMode(Enum):
    """Output modes for render_summary()."""
    DIALOG = "dialog"  # one count per line
    LOG = "log"        # single line, prefixed


def render_summary(report: RunReport, mode: SummaryMode = SummaryMode.DIALOG) -> str:
    """
    Render a report as text.

    Runs that never reached the normalizer get a fixed explanatory
    message in both modes.
    """
    if report.status is RunStatus.EMPTY_SELECTION:
        return EMPTY_SELECTION_MESSAGE
    if report.status is RunStatus.NO_DESCRIPTORS:
        return NO_DESCRIPTORS_MESSAGE

    if mode is SummaryMode.LOG:
        return (
            f"[C#11] Update complete. asmdefs: {report.total} | "
            f"created RSP: {report.created}, updated: {report.updated}, skipped: {report.skipped}"
        )

    return (
        f"Assemblies found: {report.total}\n"
        f"Created RSP: {report.created}\n"
        f"Updated: {report.updated}\n"
        f"Skipped: {report.skipped}"
    )
