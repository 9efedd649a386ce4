from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from trex.config import get_settings  # noqa: E402

BITTREX_ENV_VARS = (
    "BITTREX_API_KEY",
    "BITTREX_API_SECRET",
    "BITTREX_REST_BASE_URL",
    "BITTREX_KEEP_ALIVE",
    "BITTREX_TIMEOUT_MS",
)


@pytest.fixture(autouse=True)
def isolated_settings(request, monkeypatch) -> None:
    if request.node.get_closest_marker("live") is None:
        for name in BITTREX_ENV_VARS:
            monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def pytest_configure(config) -> None:
    config.addinivalue_line("markers", "live: 실제 Bittrex API를 호출하는 스모크 테스트")
