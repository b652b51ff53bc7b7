"""Configuration module - public API.

Exports:
    settings: Singleton IntlSettings instance
    IntlSettings: Settings class (for testing/overrides)
"""

from intl.configuration.settings import IntlSettings, settings

__all__ = ["IntlSettings", "settings"]
