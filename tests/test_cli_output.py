"""Tests for CLI output formatting utilities."""

from __future__ import annotations

import pytest

from pixelchart.cli import output


def test_success_with_prefix(capsys: pytest.CaptureFixture[str]) -> None:
    output.success("Test message")
    captured = capsys.readouterr()
    assert "✅ Test message" in captured.out


def test_success_without_prefix(capsys: pytest.CaptureFixture[str]) -> None:
    output.success("Test message", prefix=False)
    captured = capsys.readouterr()
    assert "✅" not in captured.out
    assert "Test message" in captured.out


def test_error_writes_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    output.error("Error message")
    captured = capsys.readouterr()
    assert "❌ Error message" in captured.err
    assert captured.out == ""


def test_error_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    output.error("Error message", err=False)
    captured = capsys.readouterr()
    assert "❌ Error message" in captured.out


def test_info_and_warning(capsys: pytest.CaptureFixture[str]) -> None:
    output.info("Info message")
    output.warning("Warning message", prefix=False)
    captured = capsys.readouterr()
    assert "ℹ️  Info message" in captured.out
    assert "⚠️" not in captured.out
    assert "Warning message" in captured.out
