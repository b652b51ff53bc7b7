"""Translation models for the i18n engine.

Defines dictionary sources, load records and content types.
"""

import asyncio
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Awaitable, Callable, Mapping, Optional, Union

from intl.i18n.exceptions import (
    InvalidDictionarySourceError,
    UnsupportedContentTypeError,
)

LocaleId = str
TranslationDict = Mapping[str, Any]
DictionaryLoader = Callable[[], Union[TranslationDict, Awaitable[TranslationDict]]]
Renderer = Callable[..., Any]

DEFAULT_LOCALE: LocaleId = "en-US"


class ContentType(str, Enum):
    """Closed set of content type tags recognised in `[tag]body` strings."""

    MD = "md"
    MDX = "mdx"
    MARKDOWN = "markdown"
    IMG = "img"
    IMAGE = "image"
    SVG = "svg"
    HTML = "html"

    @classmethod
    def from_string(cls, tag: str) -> "ContentType":
        """Convert a tag string to ContentType.

        Raises:
            UnsupportedContentTypeError: If the tag is not in the closed set.
        """
        try:
            return cls(tag)
        except ValueError as e:
            raise UnsupportedContentTypeError(f"Unsupported content type: {tag}") from e


@dataclass(frozen=True)
class ConcreteSource:
    """Dictionary declared as an in-memory value."""

    value: TranslationDict


@dataclass(frozen=True)
class DeferredSource:
    """Dictionary declared as a zero-argument loader.

    The loader may return the mapping directly or an awaitable of it.
    """

    loader: DictionaryLoader


DictionarySource = Union[ConcreteSource, DeferredSource]


def as_source(declared: Any) -> DictionarySource:
    """Wrap a raw configuration value into a DictionarySource.

    Mappings become ConcreteSource, callables become DeferredSource and
    existing sources are returned as-is.

    Raises:
        InvalidDictionarySourceError: For anything else.
    """
    if isinstance(declared, (ConcreteSource, DeferredSource)):
        return declared
    if isinstance(declared, Mapping):
        return ConcreteSource(declared)
    if callable(declared):
        return DeferredSource(declared)
    raise InvalidDictionarySourceError(
        f"Dictionary source must be a mapping or a loader, got {type(declared).__name__}"
    )


class LoadState(str, Enum):
    """Lifecycle of a per-locale load record."""

    UNRESOLVED = "unresolved"
    PENDING = "pending"
    RESOLVED = "resolved"
    FAILED = "failed"


@dataclass
class LoadRecord:
    """Cache entry for one locale.

    Attributes:
        locale: Locale this record belongs to.
        state: Current LoadState.
        task: Shared in-flight load while PENDING.
        value: Resolved dictionary once RESOLVED.
        error: Last failure while FAILED.
        load_count: Number of times the source has been invoked.
    """

    locale: LocaleId
    state: LoadState = LoadState.UNRESOLVED
    task: Optional["asyncio.Task[TranslationDict]"] = None
    value: Optional[TranslationDict] = None
    error: Optional[BaseException] = None
    load_count: int = 0


@dataclass(frozen=True)
class TaggedContent:
    """A `[tag]body` string split into its content type and body."""

    content_type: ContentType
    body: str


@dataclass
class IntlConfig:
    """Declared configuration for a LocaleRegistry.

    Attributes:
        dictionaries: Locale -> mapping, loader or DictionarySource.
        default_locale: Fallback locale; must be present in dictionaries.
        locale: Initial active locale (defaults to default_locale).
        renderers: Content type tag -> renderer callable.
    """

    dictionaries: Mapping[LocaleId, Any]
    default_locale: LocaleId = DEFAULT_LOCALE
    locale: Optional[LocaleId] = None
    renderers: Mapping[Union[str, ContentType], Renderer] = field(default_factory=dict)
