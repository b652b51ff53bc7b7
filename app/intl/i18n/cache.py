"""Per-locale dictionary cache with single-flight loading.

Turns a declared DictionarySource into a resolved dictionary exactly once
per locale and shares the result with every requester. Concurrent
requesters for a locale that is still loading await the same asyncio.Task.

Load records follow UNRESOLVED -> PENDING -> RESOLVED | FAILED.
RESOLVED never changes again. FAILED is retried on the next request.
"""

import asyncio
import inspect
from typing import Awaitable, Dict, Mapping, Optional

from intl.i18n.exceptions import LoaderFailureError
from intl.i18n.models import (
    ConcreteSource,
    DeferredSource,
    LoadRecord,
    LoadState,
    LocaleId,
    TranslationDict,
)
from intl.i18n.registry import LocaleRegistry
from intl.logging import get_module_logger

logger = get_module_logger()


class DictionaryCache:
    """Load-once cache of resolved dictionaries, keyed by locale.

    Attributes:
        registry: LocaleRegistry providing the declared sources.
        loader_timeout: Optional seconds after which a pending load fails.
    """

    def __init__(
        self,
        registry: LocaleRegistry,
        loader_timeout: Optional[float] = None,
    ):
        self.registry = registry
        self.loader_timeout = loader_timeout
        self._records: Dict[LocaleId, LoadRecord] = {}

    def _record(self, locale: LocaleId) -> LoadRecord:
        record = self._records.get(locale)
        if record is None:
            record = LoadRecord(locale=locale)
            self._records[locale] = record
        return record

    async def resolve(self, locale: LocaleId) -> TranslationDict:
        """Resolve the dictionary for a locale.

        Args:
            locale: Locale to resolve.

        Returns:
            The resolved dictionary, shared by all callers.

        Raises:
            UndeclaredLocaleError: If no source is declared for locale.
            LoaderFailureError: If the loader fails, times out or returns
                something other than a mapping.
        """
        source = self.registry.source_for(locale)
        record = self._record(locale)

        if record.state is LoadState.RESOLVED:
            return record.value

        if record.state is not LoadState.PENDING:
            if isinstance(source, ConcreteSource):
                record.load_count += 1
                return self._settle(record, source.value)

            record.state = LoadState.PENDING
            record.error = None
            record.task = asyncio.ensure_future(self._load(record, source))
            record.task.add_done_callback(_retrieve_exception)

        # Shielded so a cancelled waiter leaves the shared load running
        return await asyncio.shield(record.task)

    async def _load(self, record: LoadRecord, source: DeferredSource) -> TranslationDict:
        record.load_count += 1
        logger.info(
            "dictionary_load_started",
            locale=record.locale,
            attempt=record.load_count,
        )
        try:
            result = source.loader()
            if inspect.isawaitable(result):
                if self.loader_timeout is not None:
                    result = await self._await_with_timeout(record, result)
                else:
                    result = await result
        except LoaderFailureError as e:
            if record.state is not LoadState.FAILED:
                raise self._fail(record, e, str(e)) from e
            raise
        except Exception as e:
            raise self._fail(record, e, str(e) or type(e).__name__) from e

        if not isinstance(result, Mapping):
            raise self._fail(
                record,
                None,
                f"loader returned {type(result).__name__}, expected a mapping",
            )

        return self._settle(record, result)

    async def _await_with_timeout(
        self, record: LoadRecord, pending: Awaitable[TranslationDict]
    ) -> TranslationDict:
        try:
            return await asyncio.wait_for(pending, self.loader_timeout)
        except asyncio.TimeoutError as e:
            raise self._fail(
                record, e, f"timed out after {self.loader_timeout}s"
            ) from e

    def _settle(self, record: LoadRecord, value: TranslationDict) -> TranslationDict:
        record.state = LoadState.RESOLVED
        record.value = value
        record.task = None
        logger.info(
            "dictionary_loaded",
            locale=record.locale,
            key_count=len(value),
        )
        return value

    def _fail(
        self,
        record: LoadRecord,
        cause: Optional[BaseException],
        reason: str,
    ) -> LoaderFailureError:
        error = LoaderFailureError(record.locale, reason)
        record.state = LoadState.FAILED
        record.error = error
        record.task = None
        logger.error(
            "dictionary_load_failed",
            locale=record.locale,
            attempt=record.load_count,
            error=reason,
            error_type=type(cause).__name__ if cause else None,
        )
        return error

    async def preload(self, *locales: LocaleId) -> None:
        """Resolve several locales concurrently.

        Raises:
            UndeclaredLocaleError: If any locale is not declared.
            LoaderFailureError: If any load fails.
        """
        await asyncio.gather(*(self.resolve(locale) for locale in locales))

    def state(self, locale: LocaleId) -> LoadState:
        """Current LoadState for locale (UNRESOLVED if never requested)."""
        record = self._records.get(locale)
        return record.state if record else LoadState.UNRESOLVED

    def peek(self, locale: LocaleId) -> Optional[TranslationDict]:
        """Return the resolved dictionary without loading, or None."""
        record = self._records.get(locale)
        if record and record.state is LoadState.RESOLVED:
            return record.value
        return None

    def load_count(self, locale: LocaleId) -> int:
        """Number of times the source for locale has been invoked."""
        record = self._records.get(locale)
        return record.load_count if record else 0

    async def aclose(self) -> None:
        """Cancel in-flight loads and drop every load record."""
        pending = [
            record.task
            for record in self._records.values()
            if record.task is not None and not record.task.done()
        ]
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)
        self._records.clear()
        logger.info("dictionary_cache_closed", cancelled=len(pending))


def _retrieve_exception(task: "asyncio.Task[TranslationDict]") -> None:
    # Marks the exception as retrieved when every waiter has gone away
    if not task.cancelled():
        task.exception()
