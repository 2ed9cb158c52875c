from __future__ import annotations

import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from autowire._internal.locator import Locator

logger = logging.getLogger(__name__)

_CONFIG_KEY = "config"
_ALIASES_FIELD = "aliases"


class AutowireSettings(BaseSettings):
    """Environment-driven configuration for an injector's locator.

    ``AUTOWIRE_ALIASES`` holds a JSON object mapping requested class
    identifiers to the identifiers actually built, for example
    ``{"Storage": "S3Storage"}``.
    """

    model_config = SettingsConfigDict(env_prefix="AUTOWIRE_", extra="ignore")

    aliases: dict[str, str] = Field(default_factory=dict)


def configure_locator(
    locator: Locator,
    settings: AutowireSettings | None = None,
) -> Locator:
    """Merge settings into the ``config`` entry of a locator.

    Aliases already present in the locator are kept unless the settings
    redefine them. The ``config`` entry is replaced with a new mapping;
    other keys it holds are preserved.

    Args:
        locator: Locator to update.
        settings: Settings to apply. Loaded from the environment when omitted.

    Returns:
        The updated locator.

    """
    settings = AutowireSettings() if settings is None else settings

    config = dict(locator.get(_CONFIG_KEY) or {})
    aliases = dict(config.get(_ALIASES_FIELD) or {})
    aliases.update(settings.aliases)
    config[_ALIASES_FIELD] = aliases
    locator.set(_CONFIG_KEY, config)

    logger.debug("Configured %d alias(es) from settings", len(settings.aliases))
    return locator


__all__ = ["AutowireSettings", "configure_locator"]
