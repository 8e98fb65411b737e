"""
Application-wide configuration constants and helper utilities.

Values resolve from the environment first, then Streamlit secrets, then the
defaults below.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

import streamlit as st

from tourism_atlas.errors import AtlasConfigError

RAW_BASE_URL = "https://raw.githubusercontent.com"
PROXY_BASE_URL = "https://cors-anywhere.herokuapp.com/https://raw.githubusercontent.com"
PROXY_HEADERS = {"X-Requested-With": "XMLHttpRequest"}

DEFAULT_DATA_FILES: Dict[str, str] = {
    "hotels": "Inotels.json",
    "beaches": "viligags.json",
    "restaurants": "restaurants.json",
    "culturalSites": "cultural_sites.json",
}

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class TabConfig:
    key: str
    label: str


# Ordered tab definitions for the dashboard
TABS: List[TabConfig] = [
    TabConfig("overview", "لوحة المعلومات"),
    TabConfig("add_record", "إضافة سجل"),
    TabConfig("export", "تصدير التقارير"),
]


@dataclass(frozen=True)
class AtlasConfig:
    github_repo: str = "tidclibya/Libya-Tourism-Atlas"
    branch: str = "main"
    data_files: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_DATA_FILES))
    use_proxy: bool = True
    fallback_to_local: bool = True
    local_data_dir: str = "data"
    request_timeout: float = 10.0

    @property
    def base_url(self) -> str:
        return PROXY_BASE_URL if self.use_proxy else RAW_BASE_URL

    @property
    def request_headers(self) -> Dict[str, str]:
        return dict(PROXY_HEADERS) if self.use_proxy else {}

    def remote_url(self, filename: str) -> str:
        return f"{self.base_url}/{self.github_repo}/{self.branch}/{filename}"

    def local_path(self, filename: str) -> str:
        return os.path.join(self.local_data_dir, filename)


def _get_secret(name: str, default: Optional[str] = None) -> Any:
    """Try env first, then st.secrets (if available)."""
    val = os.getenv(name)
    if val:
        return val
    try:
        sec = getattr(st, "secrets", None)
        if sec:
            v = sec.get(name)  # type: ignore[index]
            if v is not None:
                return dict(v) if isinstance(v, Mapping) else str(v)
    except Exception:
        # st.secrets raises when no secrets file exists outside Streamlit Cloud
        pass
    return default


def _parse_bool(name: str, raw: Any, default: bool) -> bool:
    if raw is None:
        return default
    if isinstance(raw, bool):
        return raw
    text = str(raw).strip().lower()
    if not text:
        return default
    if text in TRUE_VALUES:
        return True
    if text in FALSE_VALUES:
        return False
    raise AtlasConfigError(f"{name} must be a boolean flag, got {raw!r}")


def _parse_float(name: str, raw: Any, default: float) -> float:
    if raw is None or not str(raw).strip():
        return default
    try:
        value = float(raw)
    except (TypeError, ValueError) as exc:
        raise AtlasConfigError(f"{name} must be a number, got {raw!r}") from exc
    if value <= 0:
        raise AtlasConfigError(f"{name} must be positive, got {raw!r}")
    return value


def _parse_data_files(raw: Any) -> Dict[str, str]:
    """Accept a mapping (TOML table), a JSON object string, or `key=file,key=file`."""
    if raw is None:
        return dict(DEFAULT_DATA_FILES)
    if isinstance(raw, Mapping):
        return {str(k).strip(): str(v).strip() for k, v in raw.items()}
    text = str(raw).strip()
    if not text:
        return dict(DEFAULT_DATA_FILES)
    if text.startswith("{"):
        try:
            parsed = json.loads(text)
        except ValueError as exc:
            raise AtlasConfigError(f"ATLAS_DATA_FILES is not valid JSON: {exc}") from exc
        if not isinstance(parsed, dict):
            raise AtlasConfigError("ATLAS_DATA_FILES JSON must be an object")
        return {str(k).strip(): str(v).strip() for k, v in parsed.items()}
    files: Dict[str, str] = {}
    for item in text.split(","):
        if not item.strip():
            continue
        key, sep, filename = item.partition("=")
        if not sep or not key.strip() or not filename.strip():
            raise AtlasConfigError(f"ATLAS_DATA_FILES entry must look like key=file, got {item!r}")
        files[key.strip()] = filename.strip()
    return files


def load_config() -> AtlasConfig:
    defaults = AtlasConfig()
    return AtlasConfig(
        github_repo=_get_secret("ATLAS_GITHUB_REPO", defaults.github_repo) or defaults.github_repo,
        branch=_get_secret("ATLAS_BRANCH", defaults.branch) or defaults.branch,
        data_files=_parse_data_files(_get_secret("ATLAS_DATA_FILES")),
        use_proxy=_parse_bool("ATLAS_USE_PROXY", _get_secret("ATLAS_USE_PROXY"), defaults.use_proxy),
        fallback_to_local=_parse_bool(
            "ATLAS_FALLBACK_TO_LOCAL",
            _get_secret("ATLAS_FALLBACK_TO_LOCAL"),
            defaults.fallback_to_local,
        ),
        local_data_dir=_get_secret("ATLAS_LOCAL_DATA_DIR", defaults.local_data_dir) or defaults.local_data_dir,
        request_timeout=_parse_float(
            "ATLAS_REQUEST_TIMEOUT", _get_secret("ATLAS_REQUEST_TIMEOUT"), defaults.request_timeout
        ),
    )
