import argparse

import pytest


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep qiish-args environment defaults out of CLI tests."""
    monkeypatch.delenv("QIISH_ARGS_LOG", raising=False)
    monkeypatch.delenv("QIISH_ARGS_FORMAT", raising=False)


@pytest.fixture
def input_file(tmp_path):
    """A small file of command lines."""
    path = tmp_path / "lines.txt"
    path.write_text("ls -la\n\necho \"hi there\" --now\n", encoding="utf-8")
    return path


@pytest.fixture
def base_namespace():
    """Namespace with every option at its default value."""

    def _make(**overrides):
        values = {
            "log": "WARNING",
            "log_file": None,
            "legacy": False,
            "command": None,
            "file": None,
            "format": "text",
            "show_config": False,
        }
        values.update(overrides)
        return argparse.Namespace(**values)

    return _make
