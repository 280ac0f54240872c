"""
rspnorm — Assembly Response-File Language-Version Normalizer

Makes every assembly (build unit, marked by an .asmdef descriptor) under a
selection compile with a minimum C# language version, by creating or
patching the csc.rsp compiler-response file beside it.

ARCHITECTURAL GUARANTEE:
------------------------
This package contains ZERO knowledge of:
    - Editor menus, dialogs or selection APIs
    - Asset database indexing
    - Invoking the compiler

Hosts pass in a selection of paths and get back a RunReport.
Only csc.rsp files are ever written.
"""

from .errors import PolicyError, RspNormError
from .locator import DescriptorSet, locate
from .model import (
    DEFAULT_POLICY,
    LangVersionPolicy,
    Outcome,
    RunReport,
    RunStatus,
    UnitResult,
)
from .normalizer import ensure_lang_version, normalize
from .runner import run

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_POLICY",
    "DescriptorSet",
    "LangVersionPolicy",
    "Outcome",
    "PolicyError",
    "RspNormError",
    "RunReport",
    "RunStatus",
    "UnitResult",
    "ensure_lang_version",
    "locate",
    "normalize",
    "run",
]
