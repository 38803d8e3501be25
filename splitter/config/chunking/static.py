"""Static chunking profile loader. Read-only; no business logic."""

import json
from pathlib import Path
from typing import Any

from splitter.config.chunking.models import SplitterConfig

_config_dir = Path(__file__).resolve().parent
_config_path = _config_dir / "static.json"

_cached: dict[str, SplitterConfig] | None = None
_active_profile: str | None = None


class UnknownProfileError(KeyError):
    """Raised when a chunking profile name is not present in static.json."""

    def __init__(self, profile_name: str):
        super().__init__(profile_name)
        self.profile_name = profile_name

    def __str__(self) -> str:
        return f"Unknown chunking profile: {self.profile_name!r}"


def _load_raw_data() -> dict:
    """Load raw JSON; used to read both profiles and active."""
    raw = _config_path.read_text(encoding="utf-8")
    return json.loads(raw)


def load_chunking_profiles() -> dict[str, SplitterConfig]:
    """Load chunking profiles from static.json. Keys are profile names."""
    global _cached
    if _cached is not None:
        return _cached
    data = _load_raw_data()
    profiles = data.get("profiles", {})
    _cached = {k: SplitterConfig.model_validate(v) for k, v in profiles.items()}
    return _cached


def get_chunking_config(profile_name: str) -> SplitterConfig | None:
    """Return chunking config for the given profile, or None if missing."""
    return load_chunking_profiles().get(profile_name)


def get_active_profile_name() -> str:
    """Return the profile name marked as active in static.json. Defaults to 'default' if missing."""
    global _active_profile
    if _active_profile is not None:
        return _active_profile
    data = _load_raw_data()
    _active_profile = data.get("active", "default")
    return _active_profile


def get_active_chunking_config() -> SplitterConfig:
    """Return the chunking config for the active profile."""
    name = get_active_profile_name()
    cfg = get_chunking_config(name)
    if cfg is None:
        raise UnknownProfileError(name)
    return cfg


def resolve_chunking_config(profile_name: str, overrides: dict[str, Any] | None = None) -> SplitterConfig:
    """
    Resolve a profile by name ("active" follows static.json) and apply overrides on top.
    Overrides are re-validated, so an override that breaks overlap < chunk_size raises.
    Raises UnknownProfileError if the profile is missing.
    """
    if profile_name == "active":
        base = get_active_chunking_config()
    else:
        base = get_chunking_config(profile_name)
        if base is None:
            raise UnknownProfileError(profile_name)
    if not overrides:
        return base
    return SplitterConfig.model_validate({**base.model_dump(), **overrides})
