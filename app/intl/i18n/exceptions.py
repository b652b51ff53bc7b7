"""Exceptions raised by the translation engine.

Configuration errors are raised loudly and are not recovered locally.
Loader failures are transient: the next request for the locale retries.
A missing translation is never an exception, it resolves to None.
"""

from typing import Optional


class IntlError(Exception):
    """Base exception for all translation engine errors.

    Example:
        try:
            await translator.resolve("greeting.hello")
        except IntlError as e:
            logger.error("translation_error", error=str(e))
    """

    pass


class IntlConfigurationError(IntlError):
    """Base exception for setup mistakes (undeclared locales, missing renderers)."""

    pass


class UndeclaredLocaleError(IntlConfigurationError):
    """Raised when a locale has no declared dictionary source.

    Example:
        >>> await cache.resolve("de-DE")
        Traceback (most recent call last):
        ...
        UndeclaredLocaleError: Locale de-DE is not declared
    """

    def __init__(self, locale: str):
        self.locale = locale
        super().__init__(
            f"Locale {locale} is not declared. Please define a dictionary for it first."
        )


class InvalidDefaultLocaleConfigurationError(IntlConfigurationError):
    """Raised at construction when the default locale has no dictionary source."""

    def __init__(self, locale: str):
        self.locale = locale
        super().__init__(
            f"Missing default locale dictionary for {locale}, "
            "please provide it in the dictionaries."
        )


class UnregisteredRendererError(IntlConfigurationError):
    """Raised when tagged content has no renderer and no override was given.

    Example:
        >>> dispatcher.dispatch("[svg]<svg/>")
        Traceback (most recent call last):
        ...
        UnregisteredRendererError: Renderer svg is not registered
    """

    def __init__(self, content_type: str):
        self.content_type = content_type
        super().__init__(
            f"Renderer {content_type} is not registered. Please define it first."
        )


class UnsupportedContentTypeError(IntlConfigurationError):
    """Raised when a renderer is registered for a tag outside the closed set."""

    pass


class InvalidDictionarySourceError(IntlConfigurationError):
    """Raised when a declared source is neither a mapping nor a loader."""

    pass


class LoaderFailureError(IntlError):
    """Raised when a dictionary loader throws, times out or returns garbage.

    The original exception is chained as __cause__. The load record is left
    retryable, so a later request for the same locale invokes the loader
    again.
    """

    def __init__(self, locale: str, reason: Optional[str] = None):
        self.locale = locale
        self.reason = reason
        message = f"Failed to load dictionary for locale {locale}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
