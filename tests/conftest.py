"""Shared fixtures: an isolated HOME and a project checkout with bundled examples."""
import logging

import pytest

from ripple_launcher.launcher_config import CONFIG_ENV_VAR, LOG_LEVEL_ENV_VAR

EXAMPLES = {
    "manifest.json": b'{"device": "example"}\n',
    "default-extn-manifest.json": b'{"extns": []}\n',
    "firebolt-app-library.json": b'{"apps": [1, 2, 3]}\n',
}


@pytest.fixture(autouse=True)
def _reset_root_logger():
    root = logging.getLogger()
    before = list(root.handlers)
    yield
    for h in list(root.handlers):
        if h not in before:
            root.removeHandler(h)
            h.close()
    for attr in ("_ripple_configured", "_ripple_log_path"):
        if hasattr(root, attr):
            delattr(root, attr)


@pytest.fixture
def home(tmp_path, monkeypatch):
    h = tmp_path / "home"
    (h / ".cargo" / "bin").mkdir(parents=True)
    monkeypatch.setenv("HOME", str(h))
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
    return h


@pytest.fixture
def project(tmp_path, home, monkeypatch):
    p = tmp_path / "checkout"
    (p / "examples").mkdir(parents=True)
    for name, data in EXAMPLES.items():
        (p / "examples" / name).write_bytes(data)
    exe = p / "ripple"
    exe.write_bytes(b"#!/bin/sh\necho ripple\n")
    exe.chmod(0o755)
    monkeypatch.chdir(p)
    monkeypatch.setattr("sys.argv", [str(exe)])
    return p


@pytest.fixture
def examples():
    return dict(EXAMPLES)


@pytest.fixture
def write_config(tmp_path):
    """Write a launcher config (yaml) and return its path."""
    import yaml

    def _write(data, name="ripple-launcher.yaml"):
        p = tmp_path / name
        p.write_text(yaml.safe_dump(data), encoding="utf-8")
        return p

    return _write
