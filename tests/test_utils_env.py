"""Tests for the environment variable utility and Settings."""

from pathlib import Path

import pytest

from cpupm.config import Settings
from cpupm.models.constants import DEFAULT_CPU_ROOT, DEFAULT_THERMAL_ROOT
from cpupm.utils.env import EnvVarTypeError, get_env


def test_get_env_basic(monkeypatch):
    """Set variables are returned; missing ones fall back to the default."""
    monkeypatch.setenv("CPUPM_TEST_VAR", "test_value")
    monkeypatch.delenv("CPUPM_MISSING_VAR", raising=False)

    assert get_env("CPUPM_TEST_VAR") == "test_value"
    assert get_env("CPUPM_MISSING_VAR", default="default") == "default"
    assert get_env("CPUPM_MISSING_VAR") is None


def test_empty_value_counts_as_unset(monkeypatch):
    """An empty variable does not become Path('.')."""
    monkeypatch.setenv("CPUPM_EMPTY", "")
    assert get_env("CPUPM_EMPTY", default=Path("/x"), as_type=Path) == Path("/x")


def test_get_env_coercion(monkeypatch):
    """Common types are coerced."""
    monkeypatch.setenv("CPUPM_BOOL_TRUE", "true")
    monkeypatch.setenv("CPUPM_BOOL_FALSE", "off")
    monkeypatch.setenv("CPUPM_INT", "123")
    monkeypatch.setenv("CPUPM_PATH", "/tmp/sys")

    assert get_env("CPUPM_BOOL_TRUE", as_type=bool) is True
    assert get_env("CPUPM_BOOL_FALSE", as_type=bool) is False
    assert get_env("CPUPM_INT", as_type=int) == 123
    assert get_env("CPUPM_PATH", as_type=Path) == Path("/tmp/sys")

    monkeypatch.setenv("CPUPM_INVALID_INT", "not_an_int")
    with pytest.raises(EnvVarTypeError) as exc_info:
        get_env("CPUPM_INVALID_INT", as_type=int)
    assert exc_info.value.name == "CPUPM_INVALID_INT"


def test_settings_defaults(monkeypatch):
    """Unset variables resolve to the standard kernel paths."""
    for name in (
        "CPUPM_CPU_ROOT",
        "CPUPM_THERMAL_ROOT",
        "CPUPM_CPUINFO_PATH",
        "CPUPM_PROFILE_DIR",
        "CPUPM_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = Settings.from_env()

    assert settings.cpu_root == DEFAULT_CPU_ROOT
    assert settings.thermal_root == DEFAULT_THERMAL_ROOT
    assert settings.log_level == "INFO"


def test_settings_from_env(sysfs_env, cpu_root):
    """CPUPM_* variables override the defaults."""
    settings = Settings.from_env()
    assert settings.cpu_root == cpu_root
    assert settings.profile_dir == sysfs_env / "profiles"
