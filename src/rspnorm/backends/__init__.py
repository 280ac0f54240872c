"""Backends for rendering run reports (dialog text, log lines)."""

from .summary import DIALOG_TITLE, SummaryMode, render_summary

__all__ = ["DIALOG_TITLE", "SummaryMode", "render_summary"]
