"""
Example project builder.

Lays out a small project with three assemblies, one in each state the
normalizer distinguishes:
    Compliant/   csc.rsp already has -langVersion:preview → skipped
    Outdated/    csc.rsp has -langVersion:9                → updated
    Fresh/       no csc.rsp                                → created
"""
import os
from typing import Dict

from rspnorm.model import DEFAULT_POLICY, LangVersionPolicy


def _write(path: str, text: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as fh:
        fh.write(text)


def build_example_project(root: str, policy: LangVersionPolicy = DEFAULT_POLICY) -> Dict[str, str]:
    """
    Create the example assemblies under `root`.

    Returns:
        Mapping of assembly name to its descriptor path
    """
    descriptors = {}
    rsp_contents = {
        "Compliant": "-langVersion:preview\n-nullable\n",
        "Outdated": "-langVersion:9\n-warnaserror+\n",
        "Fresh": None,
    }

    for name, rsp in rsp_contents.items():
        unit_dir = os.path.join(root, "Assets", "Scripts", name)
        os.makedirs(unit_dir, exist_ok=True)

        descriptor = os.path.join(unit_dir, f"{name}{policy.descriptor_extension}")
        _write(descriptor, '{\n    "name": "%s"\n}\n' % name)
        # Non-descriptor sources sit beside the descriptor
        _write(os.path.join(unit_dir, f"{name}Behaviour.cs"), "public class %sBehaviour {}\n" % name)

        if rsp is not None:
            _write(os.path.join(unit_dir, policy.response_filename), rsp)
        descriptors[name] = descriptor

    return descriptors
