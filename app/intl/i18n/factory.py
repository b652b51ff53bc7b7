"""Factory functions for creating i18n components.

Builds a Translator from IntlSettings plus optional explicit dictionaries
and renderers.
"""

from typing import Any, Mapping, Optional, Union

from intl.configuration import IntlSettings, settings as default_settings
from intl.i18n.exceptions import IntlConfigurationError
from intl.i18n.loader import discover_sources
from intl.i18n.models import ContentType, LocaleId, Renderer
from intl.i18n.registry import LocaleRegistry
from intl.i18n.translator import Translator
from intl.logging import get_module_logger

logger = get_module_logger()


def create_translator(
    dictionaries: Optional[Mapping[LocaleId, Any]] = None,
    renderers: Optional[Mapping[Union[str, ContentType], Renderer]] = None,
    settings: Optional[IntlSettings] = None,
) -> Translator:
    """Create and configure a Translator instance.

    When no dictionaries are given, file-backed sources are discovered
    under settings.TRANSLATIONS_DIR.

    Args:
        dictionaries: Locale -> mapping, loader or DictionarySource.
        renderers: Content type tag -> renderer callable.
        settings: Settings to use (default: module-level settings).

    Returns:
        Translator: Configured translator instance

    Raises:
        IntlConfigurationError: If neither dictionaries nor TRANSLATIONS_DIR is set.
        InvalidDefaultLocaleConfigurationError: If the default locale has no source.

    Usage:
        # Explicit dictionaries
        translator = create_translator(
            dictionaries={"en-US": {"greeting": "Hello"}, "fr-FR": load_fr},
        )

        # Discover <domain>.<locale>.yml files from TRANSLATIONS_DIR
        translator = create_translator()
        await translator.initialize()
    """
    settings = settings or default_settings

    if dictionaries is None:
        if settings.TRANSLATIONS_DIR is None:
            raise IntlConfigurationError(
                "No dictionaries given and TRANSLATIONS_DIR is not configured"
            )
        try:
            dictionaries = discover_sources(settings.TRANSLATIONS_DIR)
        except ValueError as e:
            raise IntlConfigurationError(str(e)) from e

    registry = LocaleRegistry(
        dictionaries=dictionaries,
        default_locale=settings.DEFAULT_LOCALE,
        locale=settings.active_locale,
        renderers=renderers,
    )
    translator = Translator(
        registry,
        loader_timeout=settings.LOADER_TIMEOUT_SECONDS,
    )
    logger.info(
        "translator_created",
        default_locale=registry.default_locale,
        locale=registry.locale,
        locales=registry.available_locales(),
        loader_timeout=settings.LOADER_TIMEOUT_SECONDS,
    )
    return translator
