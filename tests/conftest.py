import json
import os
from pathlib import Path
from types import SimpleNamespace

import pytest

from tourism_atlas import config as config_module
from tourism_atlas.config import AtlasConfig


@pytest.fixture
def make_config(tmp_path: Path):
    def _make(**overrides) -> AtlasConfig:
        params = {"local_data_dir": str(tmp_path), "use_proxy": False}
        params.update(overrides)
        return AtlasConfig(**params)

    return _make


@pytest.fixture
def write_local(tmp_path: Path):
    def _write(filename: str, payload) -> Path:
        path = tmp_path / filename
        path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def no_secrets(monkeypatch):
    """Isolate config resolution from any local secrets.toml and ATLAS_* env vars."""
    secrets: dict = {}
    monkeypatch.setattr(config_module, "st", SimpleNamespace(secrets=secrets))
    for key in list(os.environ):
        if key.startswith("ATLAS_"):
            monkeypatch.delenv(key, raising=False)
    return secrets
