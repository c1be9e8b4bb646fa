"""
Configuration for jsonhealer repairs.

This module defines the options recognised by heal() and parse().
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Optional, Union


@dataclass
class FallbackSettings:
    """Settings for the aggressive fallback pass."""
    enabled: bool = True
    wrap_bare_pairs: bool = True


@dataclass
class HealConfig:
    """Configuration options for jsonhealer repairs."""

    fallback: Optional[FallbackSettings] = None
    disabled_transformations: frozenset[str] = frozenset()

    def __init__(
        self,
        *,
        fallback: Optional[FallbackSettings] = None,
        disabled_transformations: Iterable[str] = (),
        **options: Any,  # flat options such as aggressive=False
    ):
        if fallback is not None:
            self.fallback = fallback
        else:
            self.fallback = FallbackSettings(
                enabled=options.get("aggressive", True),
                wrap_bare_pairs=options.get("wrap_bare_pairs", True),
            )
        self.disabled_transformations = frozenset(disabled_transformations)

    @property
    def aggressive(self) -> bool:
        """Whether to run the fallback pass when the ordered pipeline fails."""
        assert self.fallback is not None
        return self.fallback.enabled

    @aggressive.setter
    def aggressive(self, value: bool) -> None:
        """Enable or disable the fallback pass."""
        assert self.fallback is not None
        self.fallback.enabled = value

    @property
    def wrap_bare_pairs(self) -> bool:
        """Whether the fallback may wrap bare key-value text in braces."""
        assert self.fallback is not None
        return self.fallback.wrap_bare_pairs

    def is_enabled(self, name: str) -> bool:
        """Check whether the named transformation may run."""
        return name not in self.disabled_transformations

    @classmethod
    def conservative(cls) -> "HealConfig":
        """Create a configuration that never runs the fallback pass."""
        return cls(fallback=FallbackSettings(enabled=False))

    @classmethod
    def aggressive_preset(cls) -> "HealConfig":
        """Create the default configuration with the fallback pass enabled."""
        return cls()

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "HealConfig":
        """Create configuration from a plain mapping like {"aggressive": False}."""
        return cls(**dict(options))


def coerce_config(
    config: Union[HealConfig, Mapping[str, Any], None], **options: Any
) -> HealConfig:
    """Turn None, a mapping or a HealConfig plus keyword overrides into a HealConfig."""
    if config is None:
        return HealConfig(**options)
    if isinstance(config, HealConfig):
        if not options:
            return config
        merged = HealConfig(
            fallback=FallbackSettings(
                enabled=options.get("aggressive", config.aggressive),
                wrap_bare_pairs=options.get("wrap_bare_pairs", config.wrap_bare_pairs),
            ),
            disabled_transformations=options.get(
                "disabled_transformations", config.disabled_transformations
            ),
        )
        return merged
    if isinstance(config, Mapping):
        return HealConfig.from_options({**config, **options})
    raise TypeError(f"config must be a HealConfig or a mapping, got {type(config).__name__}")
