from autowire._internal.integrations.pydantic_settings import (
    AutowireSettings,
    configure_locator,
)

__all__ = ["AutowireSettings", "configure_locator"]
