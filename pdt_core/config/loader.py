"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import ConfigurationError
from .defaults import (
    CalendarParams,
    ComplianceParams,
    DefaultConfig,
    IndicatorParams,
    LoggingParams,
    get_default_config,
)
from .validation import ConfigValidator, ValidationError

_SECTIONS = {
    "compliance": ComplianceParams,
    "calendar": CalendarParams,
    "indicators": IndicatorParams,
    "logging": LoggingParams,
}


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_profile_config(self, profile: str) -> dict[str, Any]:
        """Load named profile overrides (e.g. a jurisdiction or paper trading)."""
        profiles_file = self.config_dir / "profiles.yaml"

        if not profiles_file.exists():
            return {}

        with open(profiles_file) as f:
            profiles_config = yaml.safe_load(f) or {}

        return profiles_config.get("profiles", {}).get(profile, {}) or {}  # type: ignore[no-any-return]

    def merge_config(
        self,
        profile: Optional[str] = None,
        overrides: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Explicit overrides (highest priority)
        2. Named profile from profiles.yaml
        3. Global defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)

        if profile:
            config = self._deep_merge(config, self.load_profile_config(profile))

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def build_config(
        self,
        profile: Optional[str] = None,
        overrides: Optional[dict[str, Any]] = None
    ) -> DefaultConfig:
        """Merge, validate and materialize a DefaultConfig."""
        merged = self.merge_config(profile, overrides)

        errors = self._unknown_keys(merged)
        errors.extend(ConfigValidator.validate_config(merged))
        if errors:
            details = [f"{err.field}: {err.message} (got: {err.value})" for err in errors]
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(details)}",
                errors=errors,
                context={"profile": profile},
            )

        return DefaultConfig(**{
            name: section_cls(**merged[name]) for name, section_cls in _SECTIONS.items()
        })

    def _unknown_keys(self, config: dict[str, Any]) -> list[ValidationError]:
        errors = []
        for section, values in config.items():
            if section not in _SECTIONS:
                errors.append(ValidationError(field=section, message="Unknown section", value=values))
                continue
            if not isinstance(values, dict):
                errors.append(ValidationError(field=section, message="Must be a mapping", value=values))
                continue
            known = {f.name for f in fields(_SECTIONS[section])}
            for key in values:
                if key not in known:
                    errors.append(ValidationError(
                        field=f"{section}.{key}", message="Unknown parameter", value=values[key]
                    ))
        return errors

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
