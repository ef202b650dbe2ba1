from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the workboard package importable when running tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from workboard.core import config as core_config  # noqa: E402


@pytest.fixture()
def app_env(tmp_path, monkeypatch):
    """Points DATA_DIR/WEB_ROOT at temp folders and resets the settings cache."""
    data_dir = tmp_path / "data"
    web_root = tmp_path / "web"
    web_root.mkdir()
    monkeypatch.setenv("DATA_DIR", str(data_dir))
    monkeypatch.setenv("WEB_ROOT", str(web_root))
    for name in ("ADMIN_USERNAME", "ADMIN_PASSWORD", "ADMIN_TOKEN", "CORS_ORIGINS"):
        monkeypatch.delenv(name, raising=False)
    core_config.get_settings.cache_clear()
    yield data_dir, web_root
    core_config.get_settings.cache_clear()


@pytest.fixture()
def client(app_env):
    from fastapi.testclient import TestClient

    from workboard.app import create_app

    with TestClient(create_app()) as test_client:
        yield test_client
