"""Path resolution with value-level default-locale fallback.

A missing key in the target locale is looked up again in the default
locale's dictionary. Dictionaries are never merged.
"""

from typing import Any, Mapping, Optional, Sequence

from intl.i18n.cache import DictionaryCache
from intl.i18n.exceptions import LoaderFailureError
from intl.i18n.models import LocaleId, TranslationDict
from intl.logging import get_module_logger

logger = get_module_logger()

_MISSING = object()


def _walk(tree: Any, segments: Sequence[str]) -> Any:
    current = tree
    for segment in segments:
        if isinstance(current, Mapping):
            if segment not in current:
                return _MISSING
            current = current[segment]
        elif isinstance(current, (list, tuple)) and segment.isdecimal():
            index = int(segment)
            if index >= len(current):
                return _MISSING
            current = current[index]
        else:
            return _MISSING
    return current


def get_by_path(tree: Any, path: Optional[str]) -> Any:
    """Return the value at a dot-separated path, or None when absent.

    Integer segments index into lists. An empty or None path returns the
    tree itself.

    Example:
        >>> get_by_path({"a": {"b": "X"}}, "a.b")
        'X'
        >>> get_by_path({"a": ["x", "y"]}, "a.1")
        'y'
    """
    if not path:
        return tree
    value = _walk(tree, path.split("."))
    return None if value is _MISSING else value


class PathResolver:
    """Extracts values from resolved dictionaries with fallback.

    Attributes:
        cache: DictionaryCache supplying resolved dictionaries.
    """

    def __init__(self, cache: DictionaryCache):
        self.cache = cache

    @property
    def default_locale(self) -> LocaleId:
        return self.cache.registry.default_locale

    async def _target_dictionary(self, locale: LocaleId) -> Optional[TranslationDict]:
        try:
            return await self.cache.resolve(locale)
        except LoaderFailureError as e:
            logger.warning(
                "target_dictionary_unavailable",
                locale=locale,
                fallback_locale=self.default_locale,
                error=str(e),
            )
            return None

    async def resolve_value(self, path: Optional[str], locale: LocaleId) -> Any:
        """Resolve a path for locale, falling back to the default locale.

        Args:
            path: Dot-separated key path; empty or None for the whole dictionary.
            locale: Effective locale.

        Returns:
            The value found, or None when neither dictionary has it.

        Raises:
            UndeclaredLocaleError: If locale has no declared source.
            LoaderFailureError: If the default locale dictionary cannot be loaded.
        """
        defaults = await self.cache.resolve(self.default_locale)
        if locale == self.default_locale:
            target = defaults
        else:
            target = await self._target_dictionary(locale)

        if not path:
            return target if target is not None else defaults

        segments = path.split(".")
        if target is not None:
            value = _walk(target, segments)
            if value is not _MISSING:
                return value

        if target is not defaults:
            value = _walk(defaults, segments)
            if value is not _MISSING:
                logger.debug(
                    "used_fallback_translation",
                    path=path,
                    requested_locale=locale,
                    fallback_locale=self.default_locale,
                )
                return value

        logger.debug("translation_not_found", path=path, locale=locale)
        return None
