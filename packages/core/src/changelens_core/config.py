import os
from datetime import timezone, tzinfo
from pathlib import Path
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml

from changelens_core.context import ParseContext
from changelens_core.strings import LocaleStrings

DEFAULT_CONFIG: dict = {
    "gerrit_url": "https://gerrit-review.googlesource.com/",
    "server_timezone": "UTC",
    "local_timezone": None,  # None = the host's zone
    "strings": {},  # LocaleStrings overrides, e.g. {"unknown": "Unbekannt"}
}


def load_config(config_path: str = ".changelens.yml", cli_overrides: Optional[dict] = None) -> dict:
    """
    Load configuration by merging (in order of precedence):
      1. Built-in defaults
      2. .changelens.yml in the current directory
      3. GERRIT_URL environment variable
      4. CLI argument overrides
    """
    config = {**DEFAULT_CONFIG, "strings": dict(DEFAULT_CONFIG["strings"])}

    path = Path(config_path)
    if path.exists():
        with open(path) as f:
            file_config = yaml.safe_load(f) or {}
        config.update(file_config)

    env_url = os.environ.get("GERRIT_URL")
    if env_url:
        config["gerrit_url"] = env_url

    if cli_overrides:
        for key, value in cli_overrides.items():
            if value is not None:
                config[key] = value

    return config


def _resolve_timezone(key: str, name) -> Optional[tzinfo]:
    """Map a configured zone name to a tzinfo.

    ``None`` is passed through and means the host's zone, which is applied per
    moment at display time so each timestamp gets its own DST offset.
    """
    if name is None:
        return None
    if not isinstance(name, str):
        raise ValueError(f"Time zone for {key} must be a zone name, got {name!r}")
    if name.upper() == "UTC":
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"Unknown time zone for {key}: {name!r}") from e


def build_context(config: dict) -> ParseContext:
    """Turn a loaded config into the collaborators handed to the parser."""
    server_timezone = _resolve_timezone("server_timezone", config.get("server_timezone"))
    return ParseContext(
        server_base_url=config["gerrit_url"],
        server_timezone=server_timezone or timezone.utc,
        local_timezone=_resolve_timezone("local_timezone", config.get("local_timezone")),
        strings=LocaleStrings.from_mapping(config.get("strings")),
    )
