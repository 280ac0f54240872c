"""
Response Normalizer — makes one unit's response file declare the language version.

For a descriptor `<dir>/<name>.asmdef` the response file is `<dir>/csc.rsp`:
    - missing       → created with the desired and nullable directives
    - compliant     → left byte-for-byte untouched
    - non-compliant → patched by ensure_lang_version() and rewritten

Errors are contained per unit: an I/O failure is logged and reported as a
skipped unit, never raised.
"""

from __future__ import annotations

import logging
import os
import re
from typing import Iterable, Optional

from .model import DEFAULT_POLICY, LangVersionPolicy, Outcome, UnitResult

logger = logging.getLogger(__name__)

_LANG_VERSION_RE = re.compile(r"-langVersion:\S+", re.IGNORECASE)


def ensure_lang_version(
    content: str,
    desired: str,
    acceptable: Iterable[str],
    newline: str = os.linesep,
) -> str:
    """
    Return `content` with the language-version directive set to `desired`.

    Steps:
        1. Work on a copy with CRLF collapsed to LF.
        2. If any acceptable directive occurs (case-insensitive), return
           `content` exactly as given.
        3. Replace every `-langVersion:<value>` token with `desired`, or
           append `desired` on a line of its own if there is none.
        4. Expand LF to `newline`.

    Args:
        content: Current response-file text
        desired: Directive to write
        acceptable: Directives that already satisfy the requirement
        newline: Line terminator for the returned text

    Returns:
        Patched text, or `content` itself when already compliant
    """
    text = content.replace("\r\n", "\n")

    folded = text.lower()
    if any(a.lower() in folded for a in acceptable):
        return content

    if _LANG_VERSION_RE.search(text):
        text = _LANG_VERSION_RE.sub(lambda _m: desired, text)
    else:
        if not text.endswith("\n"):
            text += "\n"
        text += desired + "\n"

    return text.replace("\n", newline)


def response_path_for(descriptor: str, policy: LangVersionPolicy = DEFAULT_POLICY) -> Optional[str]:
    """Path of the response file beside `descriptor`, or None if it has no directory."""
    directory = os.path.dirname(descriptor)
    if not directory:
        return None
    return os.path.join(directory, policy.response_filename)


def _read_text(path: str) -> str:
    # newline="" keeps CRLF intact; utf-8-sig drops a leading BOM
    with open(path, "r", encoding="utf-8-sig", newline="") as fh:
        return fh.read()


def _write_text(path: str, text: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as fh:
        fh.write(text)


def normalize(
    descriptor: str,
    policy: LangVersionPolicy = DEFAULT_POLICY,
    newline: str = os.linesep,
) -> UnitResult:
    """
    Create or patch the response file of one build unit.

    Args:
        descriptor: Path of the unit's descriptor file
        policy: Directives and filenames to apply
        newline: Line terminator for written content

    Returns:
        UnitResult with outcome CREATED, UPDATED or SKIPPED.
        `error` is set when the unit was skipped because of a failure.
    """
    rsp_path = response_path_for(descriptor, policy)
    if rsp_path is None:
        logger.error("Cannot determine directory of %s", descriptor)
        return UnitResult(descriptor, Outcome.SKIPPED, error="descriptor has no parent directory")

    if not os.path.exists(rsp_path):
        try:
            _write_text(rsp_path, policy.initial_content(newline))
        except OSError as e:
            logger.error("Failed to create %s: %s", rsp_path, e)
            return UnitResult(descriptor, Outcome.SKIPPED, rsp_path, error=str(e))
        logger.debug("Created %s", rsp_path)
        return UnitResult(descriptor, Outcome.CREATED, rsp_path)

    try:
        original = _read_text(rsp_path)
        modified = ensure_lang_version(original, policy.desired, policy.acceptable, newline)

        if modified == original:
            logger.debug("Already compliant: %s", rsp_path)
            return UnitResult(descriptor, Outcome.SKIPPED, rsp_path)

        _write_text(rsp_path, modified)
    except (OSError, UnicodeError) as e:
        logger.error("Failed to update %s: %s", rsp_path, e)
        return UnitResult(descriptor, Outcome.SKIPPED, rsp_path, error=str(e))

    logger.debug("Updated %s", rsp_path)
    return UnitResult(descriptor, Outcome.UPDATED, rsp_path)
