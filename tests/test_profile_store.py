"""Tests for the profile file store."""

import pytest

from cpupm.models.profile_models import Profile
from cpupm.profiles.store import ProfileStore


@pytest.fixture
def tmp_store(tmp_path):
    """Create a store backed by a temporary directory."""
    return ProfileStore(base_dir=tmp_path / "profiles")


@pytest.fixture
def quiet_profile():
    return Profile(
        name="quiet",
        description="Low clocks for fan noise",
        governor="powersave",
        max_freq=2000,
        turbo=False,
    )


class TestProfileStore:
    """JSON and YAML profile persistence."""

    def test_save_and_get_json(self, tmp_store, quiet_profile):
        """Round-trips through a JSON file."""
        path = tmp_store.save_profile(quiet_profile)
        assert path.name == "quiet.json"
        assert tmp_store.get_profile("quiet") == quiet_profile

    def test_save_and_get_yaml(self, tmp_store, quiet_profile):
        """Round-trips through a YAML file."""
        path = tmp_store.save_profile(quiet_profile, fmt="yaml")
        assert path.suffix == ".yaml"
        assert "governor: powersave" in path.read_text()
        assert tmp_store.get_profile("quiet") == quiet_profile

    def test_save_replaces_other_format(self, tmp_store, quiet_profile):
        """A name maps to a single file."""
        tmp_store.save_profile(quiet_profile, fmt="yaml")
        tmp_store.save_profile(quiet_profile, fmt="json")
        assert sorted(p.name for p in tmp_store.base_dir.iterdir()) == ["quiet.json"]

    def test_unknown_format(self, tmp_store, quiet_profile):
        """Only json and yaml are accepted."""
        with pytest.raises(ValueError):
            tmp_store.save_profile(quiet_profile, fmt="toml")

    def test_get_nonexistent_profile(self, tmp_store):
        """Return None for missing profiles."""
        assert tmp_store.get_profile("missing") is None

    def test_get_profiles_skips_malformed(self, tmp_store, quiet_profile):
        """Invalid files are skipped; valid ones load."""
        tmp_store.save_profile(quiet_profile)
        (tmp_store.base_dir / "broken.json").write_text("{not json")
        (tmp_store.base_dir / "invalid.yaml").write_text("name: x\nmax_freq: -5\n")
        (tmp_store.base_dir / "notes.txt").write_text("ignored")

        assert tmp_store.get_profiles() == [quiet_profile]

    def test_get_profiles_missing_dir(self, tmp_store):
        """A store without a directory is empty."""
        assert tmp_store.get_profiles() == []

    def test_handwritten_yaml(self, tmp_store):
        """Optional fields may be omitted."""
        tmp_store.base_dir.mkdir(parents=True)
        (tmp_store.base_dir / "gaming.yml").write_text(
            "name: gaming\ngovernor: performance\nturbo: true\n"
        )
        profile = tmp_store.get_profile("gaming")
        assert profile is not None
        assert profile.turbo is True
        assert profile.max_freq is None

    def test_delete_profile(self, tmp_store, quiet_profile):
        """Deleting removes the file."""
        tmp_store.save_profile(quiet_profile)
        assert tmp_store.delete_profile("quiet") is True
        assert tmp_store.get_profile("quiet") is None
        assert tmp_store.delete_profile("quiet") is False

    def test_path_like_names_rejected(self, tmp_store, tmp_path, quiet_profile):
        """Lookups cannot reach outside the store directory."""
        tmp_store.save_profile(quiet_profile)
        outside = tmp_path / "victim.json"
        outside.write_text("{}")

        with pytest.raises(ValueError):
            tmp_store.delete_profile("../victim")
        with pytest.raises(ValueError):
            tmp_store.get_profile("..")
        assert outside.exists()
