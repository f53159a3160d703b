"""JSON configuration: provider settings and the library location."""

import json
from dataclasses import dataclass, field
from pathlib import Path

from edlsegments.guard import DEFAULT_MARKER_EXTENSION


@dataclass
class ProviderConfig:
    """Settings for locating EDL and marker sidecar files."""

    edl_extension: str = ".edl"
    marker_extension: str = DEFAULT_MARKER_EXTENSION
    use_marker_guard: bool = False

    def __post_init__(self) -> None:
        for name in ("edl_extension", "marker_extension"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.startswith("."):
                raise ValueError(f"{name} must start with '.', got {value!r}")
        if self.edl_extension == self.marker_extension:
            raise ValueError("edl_extension and marker_extension must differ")


@dataclass
class AppConfig:
    """Top-level configuration for the CLI and web app."""

    library: Path | None = None
    provider: ProviderConfig = field(default_factory=ProviderConfig)


def load_config(path: str | Path) -> AppConfig:
    """Load a configuration from a JSON file.

    A relative ``library`` path resolves against the config file's directory.
    """
    path = Path(path)
    data = json.loads(path.read_text())

    if not isinstance(data, dict):
        raise ValueError("Config must contain a JSON object")

    provider = ProviderConfig()
    if "provider" in data:
        if not isinstance(data["provider"], dict):
            raise ValueError("Config 'provider' must contain a JSON object")
        try:
            provider = ProviderConfig(**data["provider"])
        except TypeError as e:
            raise ValueError(f"Config 'provider' must contain only known settings: {e}") from e

    library = None
    if data.get("library"):
        if not isinstance(data["library"], str):
            raise ValueError("Config 'library' must contain a path string")
        library = Path(data["library"])
        if not library.is_absolute():
            library = path.parent / library

    return AppConfig(library=library, provider=provider)
