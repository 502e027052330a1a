from __future__ import annotations

import pytest

from coursehub.config import (
    ConfigurationError,
    MissingConfigurationError,
    optional_env_var,
    optional_float_env_var,
    require_env_vars,
)


def test_require_env_vars_returns_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "value")

    result = require_env_vars(["EXAMPLE_VAR"])

    assert result["EXAMPLE_VAR"] == "value"


def test_require_env_vars_reports_every_missing_name(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MISSING_B", raising=False)
    monkeypatch.delenv("MISSING_A", raising=False)

    with pytest.raises(MissingConfigurationError) as exc:
        require_env_vars(["MISSING_B", "MISSING_A"])

    assert set(exc.value.names) == {"MISSING_A", "MISSING_B"}
    assert "MISSING_A, MISSING_B" in str(exc.value)


def test_require_env_vars_treats_blank_as_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "   ")

    with pytest.raises(MissingConfigurationError):
        require_env_vars(["EXAMPLE_VAR"])


def test_optional_env_var_falls_back_on_blank(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "")

    assert optional_env_var("EXAMPLE_VAR", "fallback") == "fallback"
    assert optional_env_var("EXAMPLE_VAR") is None


def test_optional_float_env_var(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("EXAMPLE_TIMEOUT", raising=False)
    assert optional_float_env_var("EXAMPLE_TIMEOUT", 10.0) == 10.0

    monkeypatch.setenv("EXAMPLE_TIMEOUT", "2.5")
    assert optional_float_env_var("EXAMPLE_TIMEOUT", 10.0) == 2.5


@pytest.mark.parametrize("value", ["soon", "0", "-1"])
def test_optional_float_env_var_rejects_invalid(
    monkeypatch: pytest.MonkeyPatch, value: str
) -> None:
    monkeypatch.setenv("EXAMPLE_TIMEOUT", value)

    with pytest.raises(ConfigurationError, match="EXAMPLE_TIMEOUT"):
        optional_float_env_var("EXAMPLE_TIMEOUT", 10.0)
