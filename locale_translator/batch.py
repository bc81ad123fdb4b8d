"""Batch translation driver.

Walks every table of a string-table store and routes each source-locale
entry through the provider for every target locale
(missing table -> overwrite policy -> translate -> write -> pace).

Progress goes out through an explicit callback; the driver keeps no
UI-facing state. Calls are serialized with a delay between them to stay
under the provider's rate limit.
"""

import asyncio
import logging
from dataclasses import dataclass, replace
from typing import Callable, Iterable

from locale_translator.providers.base import TranslationProvider
from locale_translator.store import StringTableStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TranslationEntry:
    """One non-empty source string."""

    table: str
    key: str
    value: str


@dataclass
class BatchProgress:
    """Snapshot handed to the progress callback."""

    completed: int = 0
    total: int = 0
    status: str = ""

    @property
    def fraction(self) -> float:
        return self.completed / self.total if self.total else 0.0


@dataclass
class ScanSummary:
    tables: int
    strings: int
    target_locales: int


@dataclass
class BatchStats:
    """Counters for one run."""

    translated: int = 0
    written: int = 0
    unchanged: int = 0
    failed: int = 0
    skipped_existing: int = 0
    skipped_missing_table: int = 0
    cancelled: bool = False


ProgressCallback = Callable[[BatchProgress], None]


class BatchTranslator:
    """Translate a store's source locale into its other locales.

    Args:
        provider: Translation provider instance.
        store: String tables to read from and write to.
        source_locale: Locale whose entries are translated.
        delay: Seconds to wait after each entry (rate pacing).
        overwrite_existing: Re-translate entries that already have a value.
        progress: Optional callback receiving a BatchProgress after each step.
    """

    def __init__(
        self,
        provider: TranslationProvider,
        store: StringTableStore,
        source_locale: str,
        delay: float = 0.3,
        overwrite_existing: bool = True,
        progress: ProgressCallback | None = None,
    ) -> None:
        self.provider = provider
        self.store = store
        self.source_locale = source_locale
        self.delay = delay
        self.overwrite_existing = overwrite_existing
        self.progress_fn = progress

        self._progress = BatchProgress()
        self._stop_event = asyncio.Event()
        self._current: asyncio.Future[str] | None = None
        self._running = False

    @property
    def is_running(self) -> bool:
        return self._running

    def target_locales(self) -> list[str]:
        """Every store locale except the source locale."""
        return [locale for locale in self.store.locales() if locale != self.source_locale]

    def collect_entries(self) -> list[TranslationEntry]:
        """Gather the non-empty source-locale entries of every table."""
        entries: list[TranslationEntry] = []
        for table in self.store.tables():
            source = self.store.get_table(table, self.source_locale)
            if source is None:
                continue
            for key, value in source.items():
                if value:
                    entries.append(TranslationEntry(table, key, value))
        return entries

    def scan(self) -> ScanSummary:
        return ScanSummary(
            tables=len(self.store.tables()),
            strings=len(self.collect_entries()),
            target_locales=len(self.target_locales()),
        )

    def stop(self) -> None:
        """Request cancellation.

        The run ends after the current entry; an in-flight translation is
        cancelled and nothing is written for it. A stopped run does not save.
        """
        if not self._running:
            return
        logger.info("[batch] stop requested")
        self._stop_event.set()
        if self._current is not None and not self._current.done():
            self._current.cancel()

    async def run(self, target_locales: Iterable[str] | None = None) -> BatchStats:
        """Translate every entry into every target locale, then save the store."""
        if self._running:
            raise RuntimeError("batch run already in progress")
        self._running = True
        self._stop_event = asyncio.Event()
        stats = BatchStats()

        try:
            entries = self.collect_entries()
            locales = list(target_locales) if target_locales is not None else self.target_locales()
            self._progress = BatchProgress(total=len(entries) * len(locales))

            if not self._progress.total:
                self._report("no translatable strings found")
                return stats

            self._report(f"translating {len(entries)} strings into {len(locales)} locales")
            for locale in locales:
                if self._stop_event.is_set():
                    break
                await self._translate_locale(entries, locale, stats)

            if self._stop_event.is_set():
                stats.cancelled = True
                self._report("cancelled")
            else:
                self.store.save()
                self._report("done")

            logger.info(
                "[batch] translated=%d written=%d unchanged=%d failed=%d "
                "skipped_existing=%d skipped_missing_table=%d cancelled=%s",
                stats.translated,
                stats.written,
                stats.unchanged,
                stats.failed,
                stats.skipped_existing,
                stats.skipped_missing_table,
                stats.cancelled,
            )
            return stats
        finally:
            self._running = False
            self._current = None

    async def _translate_locale(
        self,
        entries: list[TranslationEntry],
        locale: str,
        stats: BatchStats,
    ) -> None:
        self._report(f"translating into {locale}...")
        for entry in entries:
            if self._stop_event.is_set():
                return
            await self._translate_entry(entry, locale, stats)
            if self._stop_event.is_set():
                # The entry was cancelled mid-flight, so it is not done
                return
            self._progress.completed += 1
            self._report(f"translating... {self._progress.completed}/{self._progress.total}")
            await self._pace()

        if not self._stop_event.is_set():
            logger.info("[batch] finished locale %s", locale)

    async def _translate_entry(
        self,
        entry: TranslationEntry,
        locale: str,
        stats: BatchStats,
    ) -> None:
        target = self.store.get_table(entry.table, locale)
        if target is None:
            stats.skipped_missing_table += 1
            return

        if target.get(entry.key) and not self.overwrite_existing:
            stats.skipped_existing += 1
            return

        self._current = asyncio.ensure_future(self.provider.translate(entry.value, locale))
        try:
            translated = await self._current
        except asyncio.CancelledError:
            if not self._stop_event.is_set():
                raise
            logger.info("[batch] cancelled %s/%s -> %s", entry.table, entry.key, locale)
            return
        except Exception:
            # Providers normally absorb their own failures
            logger.exception("[batch] provider error on %s/%s -> %s", entry.table, entry.key, locale)
            stats.failed += 1
            return
        finally:
            self._current = None

        stats.translated += 1
        if translated == entry.value:
            stats.unchanged += 1
        if translated and not self._stop_event.is_set():
            self.store.set_entry(entry.table, locale, entry.key, translated)
            stats.written += 1

    async def _pace(self) -> None:
        """Wait `delay` seconds, returning early if a stop is requested."""
        if self.delay <= 0 or self._stop_event.is_set():
            return
        try:
            await asyncio.wait_for(self._stop_event.wait(), timeout=self.delay)
        except asyncio.TimeoutError:
            pass

    def _report(self, status: str) -> None:
        self._progress.status = status
        logger.debug(
            "[batch] %s (%d/%d)", status, self._progress.completed, self._progress.total
        )
        if self.progress_fn is None:
            return
        try:
            self.progress_fn(replace(self._progress))
        except Exception:
            logger.exception("[batch] progress callback failed")
