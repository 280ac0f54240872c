#!/usr/bin/env python3
"""
Demo: Update all assemblies under a selection to C# 11.

With no arguments, builds the example project in a temporary directory
and runs on it. Otherwise each argument is one selected path.
"""

import logging
import sys
import tempfile

from rspnorm.backends import DIALOG_TITLE, SummaryMode, render_summary
from rspnorm.examples import build_example_project
from rspnorm.runner import run
from rspnorm.serialization import report_to_yaml


def _run_and_print(selection):
    print("=" * 80)
    print(DIALOG_TITLE.upper())
    print("=" * 80)

    report = run(selection, refresh=lambda: print("(asset index refresh requested)"))

    print(render_summary(report, SummaryMode.DIALOG))
    print("-" * 80)
    print(report_to_yaml(report))


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    selection = sys.argv[1:]
    if selection:
        _run_and_print(selection)
        return

    with tempfile.TemporaryDirectory() as tmp:
        build_example_project(tmp)
        _run_and_print([tmp])


if __name__ == "__main__":
    main()
