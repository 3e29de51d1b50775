"""Shared fixtures: passfiles on disk and a scripted pwgen."""

from __future__ import annotations

import io

import pytest


class FakeProc:
    """Stands in for subprocess.Popen with a fixed exit code and output."""

    def __init__(self, returncode, stdout="", stderr=""):
        self.returncode = returncode
        self.stdout = io.StringIO(stdout) if isinstance(stdout, str) else stdout
        self.stderr = io.StringIO(stderr) if isinstance(stderr, str) else stderr

    def wait(self):
        return self.returncode

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.stdout.close()
        self.stderr.close()


@pytest.fixture
def store_file(tmp_path):
    """Write a passfile and return its path as a string."""

    def write(text, name="passfile"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)

    return write


@pytest.fixture
def clean_env(monkeypatch):
    monkeypatch.delenv("PWFILE", raising=False)


@pytest.fixture
def fake_pwgen(monkeypatch):
    """Script pwgen runs. Each result is a password string (exit 0), a
    (returncode, stdout, stderr) tuple, a ready-made process, or an
    exception raised on spawn.
    Returns the list of argv's pwgen was called with."""
    calls = []

    def install(*results):
        queue = list(results)

        def popen(args, **kwargs):
            calls.append(args)
            result = queue.pop(0)
            if isinstance(result, BaseException):
                raise result
            if hasattr(result, "wait"):
                return result
            if isinstance(result, str):
                result = (0, result + "\n", "")
            return FakeProc(*result)

        monkeypatch.setattr("pwfile.password.subprocess.Popen", popen)
        return calls

    return install
