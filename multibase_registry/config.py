"""Registry configuration."""

import logging

from pydantic import BaseModel, Field, field_validator

from .algorithm import AlgorithmInfo
from .registry import Registry
from .standard import STANDARD_NAMES, register_standard


class RegistryConfig(BaseModel):
    """How to populate a new :class:`Registry`."""

    include_standard: bool = Field(default=True, description="Register the standard algorithm set")
    exclude: list[str] = Field(default_factory=list, description="Standard names to skip")
    placeholders: list[AlgorithmInfo] = Field(
        default_factory=list, description="Name/code pairs reserved without an implementation"
    )

    @field_validator("exclude")
    @classmethod
    def _known_names(cls, value: list[str]) -> list[str]:
        unknown = sorted(set(value) - STANDARD_NAMES)
        if unknown:
            raise ValueError(f"Unknown standard algorithm names: {', '.join(unknown)}")
        return value


def build_registry(config: RegistryConfig | None = None) -> Registry:
    """Build and populate a registry.

    Args:
        config: Registry configuration, defaults to the standard set

    Returns:
        Populated registry
    """
    config = config or RegistryConfig()
    registry = Registry()

    if config.include_standard:
        register_standard(registry, exclude=config.exclude)

    for info in config.placeholders:
        registry.register(info.name, info.code)

    logging.debug("Built multibase registry with %d algorithms", len(registry))
    return registry
