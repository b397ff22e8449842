"""File-based storage for user-defined profiles."""

from __future__ import annotations

import json
from pathlib import Path

import yaml
from pydantic import ValidationError

from cpupm.config import Settings
from cpupm.models.profile_models import Profile
from cpupm.utils.logger import Logger

PROFILE_SUFFIXES = {".json": "json", ".yaml": "yaml", ".yml": "yaml"}


class ProfileStore:
    """Persist profiles as one JSON or YAML file each.

    Default location: ``~/.config/cpupm/profiles/`` (``CPUPM_PROFILE_DIR``).

    Storage layout::

        ~/.config/cpupm/profiles/
        ├── quiet.json
        └── gaming.yaml

    Parameters
    ----------
    base_dir : Path | None
        Directory holding profile files.  Defaults to the configured profile
        directory.
    """

    def __init__(self, base_dir: Path | None = None) -> None:
        self._base_dir = base_dir or Settings.from_env().profile_dir
        self._logger = Logger.get("profiles.store")

    @property
    def base_dir(self) -> Path:
        """Directory holding profile files."""
        return self._base_dir

    def _profile_paths(self, name: str) -> list[Path]:
        """Return every existing file for a profile name.

        Raises
        ------
        ValueError
            If ``name`` would resolve outside the store directory.
        """
        if name in ("", ".", "..") or Path(name).name != name:
            raise ValueError(f"Invalid profile name: {name!r}")
        return [
            self._base_dir / f"{name}{suffix}"
            for suffix in PROFILE_SUFFIXES
            if (self._base_dir / f"{name}{suffix}").exists()
        ]

    def _load(self, path: Path) -> Profile:
        with open(path) as f:
            if PROFILE_SUFFIXES[path.suffix] == "yaml":
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
        return Profile.model_validate(data)

    def save_profile(self, profile: Profile, fmt: str = "json") -> Path:
        """Write or overwrite a profile file.

        Parameters
        ----------
        profile : Profile
            The profile to persist.
        fmt : str
            ``"json"`` or ``"yaml"``.  Files for the same name in the other
            format are removed so a name maps to one file.

        Returns
        -------
        Path
            The written file.
        """
        if fmt not in ("json", "yaml"):
            raise ValueError(f"Unknown profile format: {fmt}")

        self._base_dir.mkdir(parents=True, exist_ok=True)
        for stale in self._profile_paths(profile.name):
            stale.unlink()

        path = self._base_dir / f"{profile.name}.{fmt}"
        with open(path, "w") as f:
            if fmt == "yaml":
                yaml.safe_dump(profile.model_dump(), f, sort_keys=False)
            else:
                json.dump(profile.model_dump(), f, indent=2)
        self._logger.debug("Saved profile '%s' to %s", profile.name, path)
        return path

    def get_profile(self, name: str) -> Profile | None:
        """Read a single profile from disk.

        Parameters
        ----------
        name : str
            Profile name (the file stem).

        Returns
        -------
        Profile | None
            The profile, or None if no file exists.
        """
        paths = self._profile_paths(name)
        if not paths:
            return None
        return self._load(paths[0])

    def get_profiles(self) -> list[Profile]:
        """Load every profile in the directory, sorted by file name.

        Malformed files are skipped with a warning.
        """
        if not self._base_dir.exists():
            return []

        profiles: list[Profile] = []
        for path in sorted(self._base_dir.iterdir()):
            if path.suffix not in PROFILE_SUFFIXES:
                continue
            try:
                profiles.append(self._load(path))
            except (OSError, ValueError, ValidationError, yaml.YAMLError) as e:
                self._logger.warning("Skipping malformed profile %s: %s", path, e)
        return profiles

    def delete_profile(self, name: str) -> bool:
        """Remove a profile's files.

        Returns
        -------
        bool
            True if a file was removed.
        """
        paths = self._profile_paths(name)
        for path in paths:
            path.unlink()
        return bool(paths)
