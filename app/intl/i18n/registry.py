"""Locale registry: the explicit store threaded through every resolution.

Holds the default locale, the active locale, the declared dictionary
sources and the renderer registry. One registry is created per application
instance; nothing here is a module-level singleton.
"""

from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Union

from intl.i18n.exceptions import (
    InvalidDefaultLocaleConfigurationError,
    UndeclaredLocaleError,
)
from intl.i18n.models import (
    DEFAULT_LOCALE,
    ContentType,
    DictionarySource,
    IntlConfig,
    LocaleId,
    Renderer,
    as_source,
)
from intl.logging import get_module_logger

logger = get_module_logger()


class LocaleRegistry:
    """Store for locale state, dictionary sources and renderers.

    Attributes:
        default_locale: Locale used for fallback; its source is mandatory.
        locale: Currently active locale.
        sources: Read-only mapping of locale -> DictionarySource.
        renderers: Read-only mapping of ContentType -> renderer.
    """

    def __init__(
        self,
        dictionaries: Mapping[LocaleId, Any],
        default_locale: LocaleId = DEFAULT_LOCALE,
        locale: Optional[LocaleId] = None,
        renderers: Optional[Mapping[Union[str, ContentType], Renderer]] = None,
    ):
        """Initialize the registry.

        Args:
            dictionaries: Locale -> mapping, loader or DictionarySource.
            default_locale: Fallback locale (default: en-US).
            locale: Initial active locale (default: default_locale).
            renderers: Content type tag -> renderer callable.

        Raises:
            InvalidDefaultLocaleConfigurationError: If default_locale has no source.
            InvalidDictionarySourceError: If a source is not a mapping or loader.
            UnsupportedContentTypeError: If a renderer tag is unknown.
        """
        if dictionaries.get(default_locale) is None:
            logger.error("missing_default_locale_dictionary", locale=default_locale)
            raise InvalidDefaultLocaleConfigurationError(default_locale)

        self._sources: Dict[LocaleId, DictionarySource] = {
            loc: as_source(declared)
            for loc, declared in dictionaries.items()
            if declared is not None
        }
        self._renderers: Dict[ContentType, Renderer] = {
            ContentType.from_string(tag): renderer
            for tag, renderer in (renderers or {}).items()
        }
        self.default_locale = default_locale
        self._locale = locale or default_locale

        logger.info(
            "initialized_locale_registry",
            default_locale=self.default_locale,
            locale=self._locale,
            locale_count=len(self._sources),
            renderer_count=len(self._renderers),
        )

    @classmethod
    def from_config(cls, config: IntlConfig) -> "LocaleRegistry":
        """Create a registry from an IntlConfig."""
        return cls(
            dictionaries=config.dictionaries,
            default_locale=config.default_locale,
            locale=config.locale,
            renderers=config.renderers,
        )

    @property
    def locale(self) -> LocaleId:
        return self._locale

    @property
    def sources(self) -> Mapping[LocaleId, DictionarySource]:
        return MappingProxyType(self._sources)

    @property
    def renderers(self) -> Mapping[ContentType, Renderer]:
        return MappingProxyType(self._renderers)

    def get_locale(self) -> LocaleId:
        """Return the active locale."""
        return self._locale

    def set_locale(self, locale: LocaleId) -> None:
        """Replace the active locale.

        Visible to every resolution issued afterwards. Already resolved
        dictionaries are kept. The locale is not required to be declared;
        resolving against an undeclared locale fails at resolution time.
        """
        previous = self._locale
        self._locale = locale
        logger.info("locale_changed", previous=previous, locale=locale)

    def has_locale(self, locale: LocaleId) -> bool:
        """Check if a dictionary source is declared for locale."""
        return locale in self._sources

    def source_for(self, locale: LocaleId) -> DictionarySource:
        """Return the declared source for locale.

        Raises:
            UndeclaredLocaleError: If no source is declared.
        """
        source = self._sources.get(locale)
        if source is None:
            logger.error("undeclared_locale", locale=locale)
            raise UndeclaredLocaleError(locale)
        return source

    def renderer_for(self, content_type: ContentType) -> Optional[Renderer]:
        """Return the registered renderer for a content type, if any."""
        return self._renderers.get(content_type)

    def available_locales(self) -> List[LocaleId]:
        """List declared locales."""
        return list(self._sources.keys())
