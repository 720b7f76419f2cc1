"""Shared fixtures for identity resolution tests"""
import json
from pathlib import Path

import pytest

from wa_identity.config import ResolverSettings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's WA_* variables out of the tests"""
    for name in ("WA_STATE_DIR", "WA_OAUTH_DIR", "WA_VERBOSE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def state_dir(tmp_path) -> Path:
    path = tmp_path / "state"
    (path / "credentials").mkdir(parents=True)
    return path


@pytest.fixture
def settings(state_dir) -> ResolverSettings:
    return ResolverSettings(state_dir=str(state_dir))


@pytest.fixture
def write_mapping():
    """Write a lid-mapping-{lid}_reverse.json file holding raw content or a JSON value"""

    def _write(directory: Path, lid: str, value=None, raw: str = None) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / f"lid-mapping-{lid}_reverse.json"
        path.write_text(raw if raw is not None else json.dumps(value), encoding="utf-8")
        return path

    return _write
