from __future__ import annotations

import pytest

from pycart.config import CartConfig
from pycart.exceptions import CartConfigError


def test_defaults_point_at_local_store() -> None:
    config = CartConfig()

    assert config.base_url == "http://localhost:3000"
    assert config.request_timeout == 30.0
    assert config.reset_staged_on_commit is True


def test_trailing_slash_is_stripped() -> None:
    assert CartConfig(base_url="http://store.test/api/").base_url == "http://store.test/api"


@pytest.mark.parametrize("kwargs", [{"base_url": "  "}, {"request_timeout": -1}])
def test_invalid_values_rejected(kwargs: dict[str, object]) -> None:
    with pytest.raises(CartConfigError):
        CartConfig(**kwargs)  # type: ignore[arg-type]


def test_from_env_reads_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CART_BASE_URL", "http://store.test")
    monkeypatch.setenv("CART_REQUEST_TIMEOUT", "2.5")
    monkeypatch.setenv("CART_RESET_STAGED_ON_COMMIT", "off")

    config = CartConfig.from_env()

    assert config.base_url == "http://store.test"
    assert config.request_timeout == 2.5
    assert config.reset_staged_on_commit is False


def test_from_env_timeout_can_be_disabled(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CART_REQUEST_TIMEOUT", "none")

    assert CartConfig.from_env().request_timeout is None


def test_from_env_rejects_bad_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CART_REQUEST_TIMEOUT", "soon")

    with pytest.raises(CartConfigError):
        CartConfig.from_env()


def test_overrides_win_over_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CART_BASE_URL", "http://store.test")
    monkeypatch.setenv("CART_REQUEST_TIMEOUT", "2.5")

    config = CartConfig.from_env(base_url="http://other.test", request_timeout=None)

    assert config.base_url == "http://other.test"
    assert config.request_timeout is None
