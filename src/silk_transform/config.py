"""Transform configuration: the two plugin options and their loaders."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

DEFAULT_CLASS_PREFIX = "silk"

# Wire key -> (dataclass field, expected JSON type)
_KEYS: dict[str, tuple[str, type]] = {
    "production": ("production", bool),
    "classPrefix": ("class_prefix", str),
}


class ConfigError(ValueError):
    """Raised when a configuration object is malformed."""


@dataclass(frozen=True)
class Configuration:
    """Options for one transform pass.

    Attributes:
        production: Emit compact hash-only class names.
        class_prefix: Prefix for generated class names.
    """

    production: bool = False
    class_prefix: str = DEFAULT_CLASS_PREFIX

    @classmethod
    def from_dict(cls, data: object) -> Configuration:
        """Build a Configuration from camelCase wire keys.

        Unknown keys and wrongly-typed values raise ConfigError.
        """
        if not isinstance(data, Mapping):
            raise ConfigError(
                f"Configuration must be an object, got {type(data).__name__}"
            )
        kwargs: dict[str, object] = {}
        for key, value in data.items():
            if key not in _KEYS:
                known = ", ".join(sorted(_KEYS))
                raise ConfigError(f"Unknown configuration key {key!r} (expected one of: {known})")
            attr, expected = _KEYS[key]
            if not isinstance(value, expected):
                raise ConfigError(
                    f"Configuration key {key!r} must be {expected.__name__}, "
                    f"got {type(value).__name__}"
                )
            kwargs[attr] = value
        return cls(**kwargs)  # type: ignore[arg-type]

    def to_dict(self) -> dict[str, object]:
        return {"production": self.production, "classPrefix": self.class_prefix}


class ConfigStatus(Enum):
    """Outcome of loading a configuration."""

    OK = "ok"
    USING_DEFAULTS = "using_defaults"


@dataclass(frozen=True)
class ConfigResult:
    """A loaded configuration, tagged with whether defaults were substituted."""

    status: ConfigStatus
    config: Configuration = field(default_factory=Configuration)
    reason: str = ""

    @property
    def is_ok(self) -> bool:
        return self.status is ConfigStatus.OK


def load_config(raw: str | Mapping[str, object] | None) -> ConfigResult:
    """Load plugin configuration without ever failing the build.

    ``None`` or an empty string means no configuration was supplied and
    yields the defaults with status OK. Anything malformed yields the
    defaults with status USING_DEFAULTS and the reason; the caller decides
    whether to surface it.
    """
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return ConfigResult(status=ConfigStatus.OK)

    data: object = raw
    if isinstance(raw, str):
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            return ConfigResult(
                status=ConfigStatus.USING_DEFAULTS,
                reason=f"Invalid configuration JSON: {exc}",
            )

    try:
        config = Configuration.from_dict(data)
    except ConfigError as exc:
        return ConfigResult(status=ConfigStatus.USING_DEFAULTS, reason=str(exc))
    return ConfigResult(status=ConfigStatus.OK, config=config)
