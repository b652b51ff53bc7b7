"""Translator facade over the resolution engine.

Wires the registry, cache, path resolver, interpolator and dispatcher
together and exposes the operations used by the enclosing application.
"""

from typing import Any, Mapping, Optional

from intl.i18n.cache import DictionaryCache
from intl.i18n.dispatcher import ContentDispatcher
from intl.i18n.interpolation import interpolate
from intl.i18n.models import LocaleId, Renderer, TranslationDict
from intl.i18n.registry import LocaleRegistry
from intl.i18n.resolver import PathResolver
from intl.logging import get_module_logger

logger = get_module_logger()


class Translator:
    """Resolves, interpolates and dispatches translations.

    Usage:
        registry = LocaleRegistry(
            dictionaries={
                "en-US": {"greeting": {"hello": "Hello, ${name}!"}},
                "fr-FR": load_french,
            },
            renderers={"markdown": render_markdown},
        )
        translator = Translator(registry)
        await translator.initialize()

        await translator.resolve("greeting.hello", {"name": "Ann"})
        translator.set_locale("fr-FR")
        await translator.translate("help.body")

    Attributes:
        registry: LocaleRegistry owning locale state.
        cache: DictionaryCache shared by every resolution.
        resolver: PathResolver applying default-locale fallback.
        dispatcher: ContentDispatcher for tagged values.
    """

    def __init__(
        self,
        registry: LocaleRegistry,
        cache: Optional[DictionaryCache] = None,
        loader_timeout: Optional[float] = None,
    ):
        self.registry = registry
        self.cache = cache or DictionaryCache(registry, loader_timeout=loader_timeout)
        self.resolver = PathResolver(self.cache)
        self.dispatcher = ContentDispatcher(registry)

    async def initialize(self) -> None:
        """Load the default locale dictionary before first use.

        Raises:
            LoaderFailureError: If the default dictionary cannot be loaded.
        """
        await self.cache.resolve(self.registry.default_locale)
        logger.info(
            "translator_initialized",
            default_locale=self.registry.default_locale,
        )

    def get_locale(self) -> LocaleId:
        """Return the active locale."""
        return self.registry.get_locale()

    def set_locale(self, locale: LocaleId) -> None:
        """Change the active locale for subsequent calls."""
        self.registry.set_locale(locale)

    async def resolve(
        self,
        path: Optional[str] = None,
        params: Optional[Mapping[str, Any]] = None,
        locale_override: Optional[LocaleId] = None,
    ) -> Any:
        """Resolve and interpolate the value at path.

        Args:
            path: Dot-separated key path, or None for the whole dictionary.
            params: Placeholder values.
            locale_override: Locale to use instead of the active one.

        Returns:
            Interpolated string, a subtree, or None when missing.
        """
        locale = locale_override or self.registry.get_locale()
        value = await self.resolver.resolve_value(path, locale)
        return interpolate(value, params)

    async def resolve_whole(self, locale: Optional[LocaleId] = None) -> TranslationDict:
        """Resolve the whole dictionary for locale (default: active locale)."""
        return await self.resolver.resolve_value(None, locale or self.registry.get_locale())

    def dispatch(
        self,
        value: Any,
        renderer: Optional[Renderer] = None,
        renderer_props: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """Route a resolved value through the content dispatcher."""
        return self.dispatcher.dispatch(value, renderer, renderer_props)

    async def translate(
        self,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        locale_override: Optional[LocaleId] = None,
        renderer: Optional[Renderer] = None,
        renderer_props: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """Resolve, interpolate and dispatch the value at path in one call."""
        value = await self.resolve(path, params, locale_override)
        return self.dispatch(value, renderer, renderer_props)

    async def t(
        self,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        locale_override: Optional[LocaleId] = None,
    ) -> Any:
        """Shorthand for translate() without a renderer override."""
        return await self.translate(path, params, locale_override)

    async def aclose(self) -> None:
        """Tear down the cache, cancelling in-flight loads."""
        await self.cache.aclose()
