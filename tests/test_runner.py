"""
Tests for the batch runner.

Checks the outcome tally over whole selections, the distinct statuses for
unusable selections, the refresh hook, and that failures never abort a batch.
"""

import logging
import os

import pytest

from rspnorm.examples import build_example_project
from rspnorm.model import Outcome, RunStatus
from rspnorm.runner import run


class RefreshSpy:
    def __init__(self):
        self.calls = 0

    def __call__(self):
        self.calls += 1


def _unit(root, name, rsp=None):
    unit = root / name
    unit.mkdir(parents=True)
    (unit / f"{name}.asmdef").write_text("{}", encoding="utf-8")
    if rsp is not None:
        (unit / "csc.rsp").write_bytes(rsp.encode("utf-8"))
    return str(unit / f"{name}.asmdef")


class TestSelectionStatus:
    def test_empty_selection(self):
        refresh = RefreshSpy()
        report = run([], refresh=refresh)

        assert report.status is RunStatus.EMPTY_SELECTION
        assert report.total == 0
        assert refresh.calls == 0

    def test_none_selection(self):
        assert run(None).status is RunStatus.EMPTY_SELECTION

    def test_all_invalid_selection(self, tmp_path):
        report = run([str(tmp_path / "gone"), ""])
        assert report.status is RunStatus.EMPTY_SELECTION

    def test_valid_selection_without_descriptors(self, tmp_path):
        (tmp_path / "Readme.txt").write_text("hi", encoding="utf-8")
        refresh = RefreshSpy()

        report = run([str(tmp_path)], refresh=refresh)

        assert report.status is RunStatus.NO_DESCRIPTORS
        assert report.total == 0
        assert refresh.calls == 0
        assert not (tmp_path / "csc.rsp").exists()


class TestBatch:
    def test_example_project_tally(self, tmp_path):
        build_example_project(str(tmp_path))
        refresh = RefreshSpy()

        report = run([str(tmp_path)], refresh=refresh)

        assert report.status is RunStatus.COMPLETED
        assert (report.created, report.updated, report.skipped) == (1, 1, 1)
        assert report.total == 3
        assert refresh.calls == 1

    def test_second_run_skips_everything(self, tmp_path):
        build_example_project(str(tmp_path))
        run([str(tmp_path)])

        report = run([str(tmp_path)])

        assert (report.created, report.updated, report.skipped) == (0, 0, 3)

    def test_descriptor_selected_twice_is_processed_once(self, tmp_path):
        descriptor = _unit(tmp_path, "Game")

        report = run([descriptor, str(tmp_path)])

        assert report.descriptors == [descriptor]
        assert report.total == 1
        assert report.created == 1

    def test_relative_descriptor_inside_absolute_directory_is_processed_once(self, tmp_path, monkeypatch):
        descriptor = _unit(tmp_path / "proj", "Game")
        monkeypatch.chdir(tmp_path)

        report = run([str(tmp_path / "proj"), os.path.join("proj", "Game", "Game.asmdef")])

        assert report.descriptors == [descriptor]
        assert (report.created, report.updated, report.skipped) == (1, 0, 0)

    def test_failure_does_not_abort_batch(self, tmp_path, caplog):
        _unit(tmp_path, "A")
        _unit(tmp_path, "B", rsp="-langVersion:9\n")
        broken = _unit(tmp_path, "C")
        (tmp_path / "C" / "csc.rsp").mkdir()
        _unit(tmp_path, "D", rsp="-langVersion:latest\n")

        with caplog.at_level(logging.ERROR):
            report = run([str(tmp_path)])

        assert report.status is RunStatus.COMPLETED
        assert (report.created, report.updated, report.skipped) == (1, 1, 2)
        assert [f.descriptor for f in report.failures] == [broken]
        assert "csc.rsp" in caplog.text

    @pytest.mark.parametrize("contents", [
        [None, None, None],
        ["", "-langVersion:9", "-langVersion:11"],
        ["-langVersion:preview", "-nullable", None],
        [None],
        ["-langVersion:8\r\n-langVersion:7", "-LANGVERSION:LATEST"],
    ])
    def test_tally_invariant(self, tmp_path, contents):
        for i, rsp in enumerate(contents):
            _unit(tmp_path, f"Unit{i}", rsp=rsp)

        report = run([str(tmp_path)])

        assert report.created + report.updated + report.skipped == len(contents)
        assert report.total == len(contents)
        assert report.created == contents.count(None)

    def test_results_follow_descriptor_order(self, tmp_path):
        _unit(tmp_path, "B")
        _unit(tmp_path, "A", rsp="-langVersion:preview")

        report = run([str(tmp_path)])

        assert report.descriptors == sorted(report.descriptors)
        assert [r.outcome for r in report.results] == [Outcome.SKIPPED, Outcome.CREATED]

    def test_summary_is_logged(self, tmp_path, caplog):
        build_example_project(str(tmp_path))

        with caplog.at_level(logging.INFO, logger="rspnorm.runner"):
            run([str(tmp_path)])

        assert "[C#11] Update complete. asmdefs: 3 | created RSP: 1, updated: 1, skipped: 1" in caplog.text
