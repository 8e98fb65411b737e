import pytest

from tourism_atlas.config import (
    DEFAULT_DATA_FILES,
    PROXY_BASE_URL,
    RAW_BASE_URL,
    AtlasConfig,
    load_config,
)
from tourism_atlas.errors import AtlasConfigError


def test_defaults_without_env_or_secrets(no_secrets) -> None:
    config = load_config()

    assert config.github_repo == "tidclibya/Libya-Tourism-Atlas"
    assert config.branch == "main"
    assert config.data_files == DEFAULT_DATA_FILES
    assert config.use_proxy is True
    assert config.fallback_to_local is True
    assert config.request_timeout == 10.0


def test_env_overrides(no_secrets, monkeypatch) -> None:
    monkeypatch.setenv("ATLAS_GITHUB_REPO", "me/atlas")
    monkeypatch.setenv("ATLAS_BRANCH", "staging")
    monkeypatch.setenv("ATLAS_USE_PROXY", "no")
    monkeypatch.setenv("ATLAS_FALLBACK_TO_LOCAL", "0")
    monkeypatch.setenv("ATLAS_REQUEST_TIMEOUT", "2.5")
    monkeypatch.setenv(
        "ATLAS_DATA_FILES",
        "hotels=h.json, beaches=b.json,restaurants=r.json,culturalSites=c.json",
    )

    config = load_config()

    assert config.remote_url("h.json") == f"{RAW_BASE_URL}/me/atlas/staging/h.json"
    assert config.request_headers == {}
    assert config.fallback_to_local is False
    assert config.request_timeout == 2.5
    assert config.data_files["beaches"] == "b.json"


def test_data_files_accepts_json_object(no_secrets, monkeypatch) -> None:
    monkeypatch.setenv("ATLAS_DATA_FILES", '{"hotels": "x.json"}')
    assert load_config().data_files == {"hotels": "x.json"}


def test_secrets_are_used_when_env_is_unset(no_secrets) -> None:
    no_secrets["ATLAS_BRANCH"] = "gh-pages"
    no_secrets["ATLAS_DATA_FILES"] = {"hotels": "a.json", "beaches": "b.json"}

    config = load_config()

    assert config.branch == "gh-pages"
    assert config.data_files == {"hotels": "a.json", "beaches": "b.json"}


@pytest.mark.parametrize(
    "name, value",
    [
        ("ATLAS_USE_PROXY", "maybe"),
        ("ATLAS_REQUEST_TIMEOUT", "soon"),
        ("ATLAS_REQUEST_TIMEOUT", "-1"),
        ("ATLAS_DATA_FILES", "hotels"),
        ("ATLAS_DATA_FILES", "{not json"),
    ],
)
def test_malformed_values_raise(no_secrets, monkeypatch, name, value) -> None:
    monkeypatch.setenv(name, value)
    with pytest.raises(AtlasConfigError):
        load_config()


def test_proxy_config_builds_proxy_url() -> None:
    config = AtlasConfig(use_proxy=True)
    assert config.remote_url("x.json") == f"{PROXY_BASE_URL}/tidclibya/Libya-Tourism-Atlas/main/x.json"
    assert config.request_headers == {"X-Requested-With": "XMLHttpRequest"}
