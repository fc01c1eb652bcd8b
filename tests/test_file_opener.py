"""Tests for opening exported files."""

import os
import sys

from dayscounter import file_opener
from dayscounter.file_opener import open_file


def test_open_file_linux_uses_xdg_open(tmp_path, monkeypatch, reporter):
    """Test Linux hands the file to xdg-open."""
    calls = []
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.setattr(
        file_opener.subprocess, "Popen", lambda args, **kwargs: calls.append(args)
    )
    path = tmp_path / "event.ics"

    assert open_file(path, reporter) is True
    assert calls == [["xdg-open", str(path)]]
    assert reporter.messages == []


def test_open_file_macos_uses_open(tmp_path, monkeypatch, reporter):
    """Test macOS hands the file to open."""
    calls = []
    monkeypatch.setattr(sys, "platform", "darwin")
    monkeypatch.setattr(
        file_opener.subprocess, "Popen", lambda args, **kwargs: calls.append(args)
    )

    assert open_file(tmp_path / "event.ics", reporter) is True
    assert calls[0][0] == "open"


def test_open_file_windows_uses_startfile(tmp_path, monkeypatch, reporter):
    """Test Windows uses the shell association."""
    calls = []
    monkeypatch.setattr(sys, "platform", "win32")
    monkeypatch.setattr(os, "startfile", lambda path: calls.append(path), raising=False)
    path = tmp_path / "event.ics"

    assert open_file(path, reporter) is True
    assert calls == [path]


def test_open_file_failure_is_reported(tmp_path, monkeypatch, reporter):
    """Test a missing opener is reported instead of raised."""

    def missing(args, **kwargs):
        raise FileNotFoundError("xdg-open")

    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.setattr(file_opener.subprocess, "Popen", missing)

    assert open_file(tmp_path / "event.ics", reporter) is False
    assert reporter.levels() == ["error"]
    assert reporter.messages[0][1] == "The file could not be opened automatically."
