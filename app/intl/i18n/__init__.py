"""i18n engine - locale registry, dictionary loading and resolution.

Main components:
- models: dictionary sources, load records, content types
- registry: LocaleRegistry holding locale state, sources and renderers
- cache: DictionaryCache with single-flight, load-once semantics
- resolver: PathResolver with value-level default-locale fallback
- interpolation: ${placeholder} substitution
- dispatcher: ContentDispatcher for [tag]body values
- translator: Translator facade
- loader: file-backed dictionary loaders
- factory: create_translator from settings
"""

from intl.i18n.cache import DictionaryCache
from intl.i18n.dispatcher import ContentDispatcher, parse_tagged
from intl.i18n.exceptions import (
    IntlConfigurationError,
    IntlError,
    InvalidDefaultLocaleConfigurationError,
    InvalidDictionarySourceError,
    LoaderFailureError,
    UndeclaredLocaleError,
    UnregisteredRendererError,
    UnsupportedContentTypeError,
)
from intl.i18n.factory import create_translator
from intl.i18n.interpolation import interpolate
from intl.i18n.loader import FileDictionaryLoader, discover_sources
from intl.i18n.models import (
    ConcreteSource,
    ContentType,
    DeferredSource,
    IntlConfig,
    LoadState,
    TaggedContent,
    as_source,
)
from intl.i18n.registry import LocaleRegistry
from intl.i18n.resolver import PathResolver, get_by_path
from intl.i18n.translator import Translator

__all__ = [
    "ConcreteSource",
    "ContentDispatcher",
    "ContentType",
    "DeferredSource",
    "DictionaryCache",
    "FileDictionaryLoader",
    "IntlConfig",
    "IntlConfigurationError",
    "IntlError",
    "InvalidDefaultLocaleConfigurationError",
    "InvalidDictionarySourceError",
    "LoadState",
    "LoaderFailureError",
    "LocaleRegistry",
    "PathResolver",
    "TaggedContent",
    "Translator",
    "UndeclaredLocaleError",
    "UnregisteredRendererError",
    "UnsupportedContentTypeError",
    "as_source",
    "create_translator",
    "discover_sources",
    "get_by_path",
    "interpolate",
    "parse_tagged",
]
