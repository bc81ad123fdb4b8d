"""String-table storage.

The batch driver only needs the StringTableStore protocol. The JSON file
store keeps every table in one document shaped {table: {locale: {key: value}}}.
"""

import json
import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class StringTableStore(Protocol):
    """What the batch driver needs from wherever string tables live."""

    def tables(self) -> list[str]:
        """Names of all tables."""
        ...

    def locales(self) -> list[str]:
        """Every locale present in at least one table."""
        ...

    def get_table(self, table: str, locale: str) -> dict[str, str] | None:
        """Entries of one table in one locale, or None if it has no such locale."""
        ...

    def set_entry(self, table: str, locale: str, key: str, value: str) -> None:
        ...

    def save(self) -> None:
        ...


class JsonStringTableStore:
    """String tables kept in a single JSON file.

    Args:
        path: JSON file to load from and save to. A missing file starts empty.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._data: dict[str, dict[str, dict[str, str]]] = {}
        if self.path.exists():
            data = json.loads(self.path.read_text(encoding="utf-8"))
            if not isinstance(data, dict):
                raise ValueError(f"{self.path}: expected a JSON object of tables")
            self._data = data
        logger.debug("Loaded %d tables from %s", len(self._data), self.path)

    def tables(self) -> list[str]:
        return list(self._data.keys())

    def locales(self) -> list[str]:
        found: set[str] = set()
        for table in self._data.values():
            found.update(table.keys())
        return sorted(found)

    def get_table(self, table: str, locale: str) -> dict[str, str] | None:
        entries = self._data.get(table, {}).get(locale)
        if entries is None:
            return None
        return dict(entries)

    def add_locale(self, table: str, locale: str) -> None:
        """Create an empty locale in a table so it becomes a translation target."""
        self._data.setdefault(table, {}).setdefault(locale, {})

    def set_entry(self, table: str, locale: str, key: str, value: str) -> None:
        self._data.setdefault(table, {}).setdefault(locale, {})[key] = value

    def save(self) -> None:
        self.path.write_text(
            json.dumps(self._data, ensure_ascii=False, indent=2) + "\n",
            encoding="utf-8",
        )
        logger.info("Saved %d tables to %s", len(self._data), self.path)
