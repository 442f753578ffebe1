"""Static index definition profile loader. Read-only; no business logic."""

import json
from pathlib import Path
from typing import Any

from indexdef.config.definitions.models import IndexDefinitionConfig

_config_dir = Path(__file__).resolve().parent
_config_path = _config_dir / "static.json"

_cached: dict[str, IndexDefinitionConfig] | None = None


def load_definition_profiles() -> dict[str, IndexDefinitionConfig]:
    """Load definition profiles from static.json. Keys are profile names."""
    global _cached
    if _cached is not None:
        return _cached
    raw = _config_path.read_text(encoding="utf-8")
    data = json.loads(raw)
    profiles = data.get("profiles", {})
    _cached = {k: IndexDefinitionConfig.model_validate(v) for k, v in profiles.items()}
    return _cached


def list_profile_names() -> list[str]:
    """Return profile names in file order."""
    return list(load_definition_profiles())


def get_definition_config(profile_name: str) -> IndexDefinitionConfig | None:
    """Return definition config for the given profile, or None if missing."""
    return load_definition_profiles().get(profile_name)


def resolve_definition_config(profile_or_inline: str | dict[str, Any]) -> IndexDefinitionConfig:
    """
    Resolve a definition from a profile name (str) or an inline object (dict).
    Raises ValueError if the profile is unknown; pydantic ValidationError if the inline dict is invalid.
    """
    if isinstance(profile_or_inline, dict):
        return IndexDefinitionConfig.model_validate(profile_or_inline)
    name = profile_or_inline.strip()
    config = get_definition_config(name)
    if config is None:
        raise ValueError(f"Unknown index definition profile: {profile_or_inline!r}")
    return config
