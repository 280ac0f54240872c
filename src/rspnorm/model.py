"""
Core Data Objects

Defines the small set of values passed between the locator, the normalizer
and the batch runner:
    - Outcome (what happened to one build unit)
    - RunStatus (how a whole run ended)
    - LangVersionPolicy (which directive we want and which ones we accept)
    - UnitResult (outcome of one descriptor)
    - RunReport (tally over a whole selection)

ARCHITECTURAL RULE:
    These objects:
        - Perform no filesystem access
        - Are plain dataclasses
        - Are fully serializable (see rspnorm.serialization)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from .errors import PolicyError


class Outcome(Enum):
    """Terminal state of one build unit."""
    CREATED = "created"    # response file did not exist and was written
    UPDATED = "updated"    # response file existed and was patched
    SKIPPED = "skipped"    # already compliant, malformed, or failed


class RunStatus(Enum):
    """How a batch run ended."""
    EMPTY_SELECTION = "empty_selection"  # nothing selected, or nothing that exists
    NO_DESCRIPTORS = "no_descriptors"    # valid selection, zero descriptors found
    COMPLETED = "completed"


DESIRED_LANG_ARG = "-langVersion:preview"
ACCEPTABLE_LANG_ARGS = (
    "-langVersion:preview",
    "-langVersion:11",
    "-langVersion:latest",
)
NULLABLE_ARG = "-nullable"
RSP_FILENAME = "csc.rsp"
ASMDEF_EXTENSION = ".asmdef"


@dataclass(frozen=True)
class LangVersionPolicy:
    """
    Describes the language-version requirement applied to every unit.

    Properties:
        desired:
            Directive written when a file is created or patched.
            Must itself be acceptable, otherwise patching never converges.

        acceptable:
            Ordered directives that already satisfy the requirement.
            A file containing any of them (case-insensitive substring)
            is left untouched.

        nullable:
            Second directive written only when a response file is created.

        response_filename:
            Name of the response file placed beside each descriptor.

        descriptor_extension:
            File extension marking a build-unit descriptor.
    """

    desired: str = DESIRED_LANG_ARG
    acceptable: Tuple[str, ...] = ACCEPTABLE_LANG_ARGS
    nullable: str = NULLABLE_ARG
    response_filename: str = RSP_FILENAME
    descriptor_extension: str = ASMDEF_EXTENSION

    def __post_init__(self) -> None:
        # Lists from config files are frozen into tuples
        object.__setattr__(self, "acceptable", tuple(self.acceptable))

        if not self.desired or not self.desired.strip():
            raise PolicyError("desired directive must not be empty")
        if any(not a for a in self.acceptable):
            raise PolicyError("acceptable directives must not be empty")
        if not self.is_compliant(self.desired):
            raise PolicyError(
                f"desired directive '{self.desired}' is not in the acceptable set {list(self.acceptable)}"
            )
        if not self.response_filename or "/" in self.response_filename or "\\" in self.response_filename:
            raise PolicyError(f"invalid response filename: '{self.response_filename}'")
        if not self.descriptor_extension.startswith("."):
            raise PolicyError(f"descriptor extension must start with '.': '{self.descriptor_extension}'")

    def is_compliant(self, text: str) -> bool:
        """True if `text` contains any acceptable directive, ignoring case."""
        folded = text.lower()
        return any(a.lower() in folded for a in self.acceptable)

    def initial_content(self, newline: str) -> str:
        """Content of a freshly created response file."""
        return self.desired + newline + self.nullable + newline


DEFAULT_POLICY = LangVersionPolicy()


@dataclass
class UnitResult:
    """Result of normalizing one descriptor's response file."""

    descriptor: str
    outcome: Outcome
    response_path: Optional[str] = None
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.error is not None


@dataclass
class RunReport:
    """
    Tally of one batch run.

    INVARIANT:
        created + updated + skipped == total
        (each processed descriptor contributes exactly one outcome,
        failures included as skipped)
    """

    status: RunStatus = RunStatus.COMPLETED
    descriptors: List[str] = field(default_factory=list)
    results: List[UnitResult] = field(default_factory=list)
    created: int = 0
    updated: int = 0
    skipped: int = 0

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def failures(self) -> List[UnitResult]:
        return [r for r in self.results if r.failed]

    def record(self, result: UnitResult) -> None:
        """Append a unit result and bump exactly one counter."""
        self.results.append(result)
        if result.outcome is Outcome.CREATED:
            self.created += 1
        elif result.outcome is Outcome.UPDATED:
            self.updated += 1
        else:
            self.skipped += 1
