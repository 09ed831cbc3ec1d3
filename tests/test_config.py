"""Tests for RegistryConfig."""

from __future__ import annotations

import dataclasses

import pytest

from enumkit import RegistryConfig


class TestRegistryConfig:
    def test_defaults(self) -> None:
        config = RegistryConfig()

        assert config.strict is False
        assert config.scan_docstrings is True

    def test_frozen(self) -> None:
        config = RegistryConfig()

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.strict = True  # type: ignore[misc]

    @pytest.mark.parametrize("field", ["strict", "scan_docstrings"])
    def test_flags_must_be_bool(self, field: str) -> None:
        with pytest.raises(TypeError, match=f"{field} must be a bool"):
            RegistryConfig(**{field: 1})  # type: ignore[arg-type]

    def test_equality(self) -> None:
        assert RegistryConfig(strict=True) == RegistryConfig(strict=True)
        assert RegistryConfig(strict=True) != RegistryConfig()
