"""End-to-end CLI tests against fake sysfs trees."""

import pytest
from click.testing import CliRunner

from conftest import build_zone

from cpupm.cli import cpupm


@pytest.fixture
def runner():
    return CliRunner()


def read(path):
    return path.read_text().strip()


def test_status(runner, sysfs_env):
    """Status shows model, driver, frequencies and turbo."""
    result = runner.invoke(cpupm, ["status"])

    assert result.exit_code == 0
    assert "i7-1185G7" in result.output
    assert "intel_pstate" in result.output
    assert "HW range:  800-4500 MHz" in result.output
    assert "Average:   2150 MHz" in result.output
    assert "Turbo:     Enabled" in result.output
    assert "Core 3: 2300 MHz (powersave)" in result.output


def test_status_without_cpufreq(runner, sysfs_env, monkeypatch, tmp_path):
    """An unusable cpu root exits with an error."""
    monkeypatch.setenv("CPUPM_CPU_ROOT", str(tmp_path / "missing"))
    result = runner.invoke(cpupm, ["status"])
    assert result.exit_code == 1
    assert "Error:" in result.output


def test_set_governor(runner, sysfs_env, cpu_root):
    result = runner.invoke(cpupm, ["set-governor", "performance"])

    assert result.exit_code == 0
    assert "Governor set to: performance" in result.output
    assert read(cpu_root / "cpu2" / "cpufreq" / "scaling_governor") == "performance"


def test_set_governor_unknown(runner, sysfs_env, cpu_root):
    """Unavailable governors fail without writing."""
    result = runner.invoke(cpupm, ["set-governor", "ondemand"])

    assert result.exit_code == 1
    assert "ondemand" in result.output
    assert read(cpu_root / "cpu0" / "cpufreq" / "scaling_governor") == "powersave"


def test_set_frequency(runner, sysfs_env, cpu_root):
    result = runner.invoke(cpupm, ["set-frequency", "3000"])

    assert result.exit_code == 0
    assert "Frequency set to: 3000 MHz" in result.output
    freq = cpu_root / "cpu1" / "cpufreq"
    assert read(freq / "scaling_min_freq") == "3000000"
    assert read(freq / "scaling_max_freq") == "3000000"


def test_set_frequency_out_of_range(runner, sysfs_env, cpu_root):
    result = runner.invoke(cpupm, ["set-frequency", "9000"])

    assert result.exit_code == 1
    assert "core 0" in result.output
    assert read(cpu_root / "cpu0" / "cpufreq" / "scaling_max_freq") == "4500000"


def test_set_turbo_off(runner, sysfs_env, cpu_root):
    """intel_pstate stores the inverted value."""
    result = runner.invoke(cpupm, ["set-turbo", "off"])

    assert result.exit_code == 0
    assert "Turbo boost: Disabled" in result.output
    assert read(cpu_root / "intel_pstate" / "no_turbo") == "1"


def test_reset_limits(runner, sysfs_env, cpu_root):
    runner.invoke(cpupm, ["set-frequency", "1200"])
    result = runner.invoke(cpupm, ["reset-limits"])

    assert result.exit_code == 0
    freq = cpu_root / "cpu3" / "cpufreq"
    assert read(freq / "scaling_min_freq") == "800000"
    assert read(freq / "scaling_max_freq") == "4500000"


def test_profiles_lists_builtin_and_stored(runner, sysfs_env):
    profile_dir = sysfs_env / "profiles"
    profile_dir.mkdir()
    (profile_dir / "quiet.yaml").write_text(
        "name: quiet\ndescription: Fan noise\ngovernor: powersave\n"
        "max_freq: 2000\nturbo: false\n"
    )

    result = runner.invoke(cpupm, ["profiles"])

    assert result.exit_code == 0
    for name in ("power-saver", "balanced", "performance", "quiet"):
        assert name in result.output
    assert "max=2000 MHz" in result.output
    assert "Fan noise" in result.output


def test_apply_stored_profile(runner, sysfs_env, cpu_root):
    profile_dir = sysfs_env / "profiles"
    profile_dir.mkdir()
    (profile_dir / "quiet.yaml").write_text(
        "name: quiet\ngovernor: powersave\nmax_freq: 2000\nturbo: false\n"
    )

    result = runner.invoke(cpupm, ["apply-profile", "quiet"])

    assert result.exit_code == 0
    assert "Profile 'quiet' applied" in result.output
    assert read(cpu_root / "cpu0" / "cpufreq" / "scaling_max_freq") == "2000000"
    assert read(cpu_root / "intel_pstate" / "no_turbo") == "1"


def test_apply_missing_profile(runner, sysfs_env):
    result = runner.invoke(cpupm, ["apply-profile", "nope"])
    assert result.exit_code == 1
    assert "Profile not found" in result.output


def test_thermal_no_zones(runner, sysfs_env):
    result = runner.invoke(cpupm, ["thermal"])
    assert result.exit_code == 0
    assert "No thermal zones found." in result.output


def test_thermal_with_trips(runner, sysfs_env, thermal_root):
    build_zone(thermal_root, 0, "acpitz", 41_000)
    build_zone(thermal_root, 1, "x86_pkg_temp", 77_000, trips=[(100_000, "critical")])

    result = runner.invoke(cpupm, ["thermal", "--trips"])

    assert result.exit_code == 0
    assert "Zone 1: x86_pkg_temp" in result.output
    assert "trip 0: 100.0°C (critical)" in result.output
    assert "CPU temperature: 77.0°C (hot)" in result.output


def test_version(runner):
    result = runner.invoke(cpupm, ["version"])
    assert result.exit_code == 0
    assert "cpupm 0.1.0" in result.output

    result = runner.invoke(cpupm, ["version", "-v"])
    assert "Release Date:" in result.output
