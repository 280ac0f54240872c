"""
Batch runner — the seam between a host (editor menu, script, CLI) and the core.

    selection → locate() → normalize() per descriptor → RunReport

Units are processed one after another with no shared state besides the
report. A failing unit is counted as skipped and the batch carries on.
"""

from __future__ import annotations

import logging
import os
from typing import Callable, Iterable, Optional

from .backends.summary import SummaryMode, render_summary
from .locator import existing_entries, locate
from .model import DEFAULT_POLICY, LangVersionPolicy, RunReport, RunStatus
from .normalizer import normalize

logger = logging.getLogger(__name__)


def run(
    selection: Iterable[str],
    policy: LangVersionPolicy = DEFAULT_POLICY,
    refresh: Optional[Callable[[], None]] = None,
    newline: str = os.linesep,
) -> RunReport:
    """
    Normalize the response files of every unit reachable from `selection`.

    Args:
        selection: Paths chosen by the user (directories or descriptor files)
        policy: Language-version policy to enforce
        refresh: Called once after a completed run so the host can
            re-index the files it manages. Not called when nothing was processed.
        newline: Line terminator for written content

    Returns:
        RunReport with status and created/updated/skipped counters
    """
    selection = list(selection or [])

    if not existing_entries(selection):
        logger.info("Nothing usable selected (%d entries)", len(selection))
        return RunReport(status=RunStatus.EMPTY_SELECTION)

    descriptors = sorted(locate(selection, policy.descriptor_extension))
    if not descriptors:
        logger.info("No %s files found under the selection", policy.descriptor_extension)
        return RunReport(status=RunStatus.NO_DESCRIPTORS)

    report = RunReport(status=RunStatus.COMPLETED, descriptors=descriptors)
    for descriptor in descriptors:
        report.record(normalize(descriptor, policy, newline))

    if refresh is not None:
        refresh()

    logger.info(render_summary(report, SummaryMode.LOG))
    return report
