"""
Serialization helpers for rspnorm objects (LangVersionPolicy, RunReport).

Policies round-trip through JSON/YAML via an intermediate dict, which is
also how configuration files are loaded. Reports are written out only.
"""
from __future__ import annotations

import json
import os
from typing import Any, Dict

import yaml

from rspnorm.errors import PolicyError
from rspnorm.model import (
    DEFAULT_POLICY,
    LangVersionPolicy,
    RunReport,
    UnitResult,
)


_POLICY_KEYS = ("desired", "acceptable", "nullable", "response_filename", "descriptor_extension")


def policy_to_dict(p: LangVersionPolicy) -> Dict[str, Any]:
    return {
        "desired": p.desired,
        "acceptable": list(p.acceptable),
        "nullable": p.nullable,
        "response_filename": p.response_filename,
        "descriptor_extension": p.descriptor_extension,
    }


def policy_from_dict(d: Dict[str, Any] | None) -> LangVersionPolicy:
    """Build a policy; keys left out take their default values."""
    if d is None:
        return DEFAULT_POLICY
    if not isinstance(d, dict):
        raise PolicyError(f"policy must be a mapping, got {type(d).__name__}")
    unknown = set(d) - set(_POLICY_KEYS)
    if unknown:
        raise PolicyError(f"unknown policy keys: {sorted(unknown)}")

    acceptable = d.get("acceptable", DEFAULT_POLICY.acceptable)
    if isinstance(acceptable, str) or not isinstance(acceptable, (list, tuple)):
        raise PolicyError("'acceptable' must be a list of directives")
    if not all(isinstance(a, str) for a in acceptable):
        raise PolicyError("'acceptable' entries must be strings")
    for key in ("desired", "nullable", "response_filename", "descriptor_extension"):
        if key in d and not isinstance(d[key], str):
            raise PolicyError(f"'{key}' must be a string")

    return LangVersionPolicy(
        desired=d.get("desired", DEFAULT_POLICY.desired),
        acceptable=tuple(acceptable),
        nullable=d.get("nullable", DEFAULT_POLICY.nullable),
        response_filename=d.get("response_filename", DEFAULT_POLICY.response_filename),
        descriptor_extension=d.get("descriptor_extension", DEFAULT_POLICY.descriptor_extension),
    )


def policy_to_json(p: LangVersionPolicy) -> str:
    return json.dumps(policy_to_dict(p), sort_keys=True)


def policy_from_json(s: str) -> LangVersionPolicy:
    try:
        d = json.loads(s)
    except json.JSONDecodeError as e:
        raise PolicyError(f"invalid JSON policy: {e}") from e
    return policy_from_dict(d)


def policy_to_yaml(p: LangVersionPolicy) -> str:
    return yaml.safe_dump(policy_to_dict(p), sort_keys=False)


def policy_from_yaml(s: str) -> LangVersionPolicy:
    try:
        d = yaml.safe_load(s)
    except yaml.YAMLError as e:
        raise PolicyError(f"invalid YAML policy: {e}") from e
    return policy_from_dict(d)


def load_policy(path: str) -> LangVersionPolicy:
    """
    Read a policy file.

    `.json` files are parsed as JSON, everything else as YAML.
    """
    with open(path, "r", encoding="utf-8") as fh:
        text = fh.read()
    if os.path.splitext(path)[1].lower() == ".json":
        return policy_from_json(text)
    return policy_from_yaml(text)


def unit_result_to_dict(r: UnitResult) -> Dict[str, Any]:
    return {
        "descriptor": r.descriptor,
        "response_path": r.response_path,
        "outcome": r.outcome.value,
        "error": r.error,
    }


def report_to_dict(r: RunReport) -> Dict[str, Any]:
    return {
        "status": r.status.value,
        "total": r.total,
        "created": r.created,
        "updated": r.updated,
        "skipped": r.skipped,
        "results": [unit_result_to_dict(u) for u in r.results],
    }


def report_to_json(r: RunReport) -> str:
    return json.dumps(report_to_dict(r), sort_keys=True)


def report_to_yaml(r: RunReport) -> str:
    return yaml.safe_dump(report_to_dict(r), sort_keys=False)
