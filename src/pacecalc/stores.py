"""Bounded history and favorites lists, optionally backed by a JSON file."""

import logging
from pathlib import Path
from typing import ClassVar, Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel, TypeAdapter, ValidationError

from .errors import StoreError
from .models import ConversionRecord, FavoriteConversion

logger = logging.getLogger(__name__)

DEFAULT_MAX_ITEMS = 20

ItemT = TypeVar("ItemT", bound=BaseModel)


class _JsonListStore(Generic[ItemT]):
    """
    Most-recent-first list with a maximum length.

    When ``path`` is set the list is loaded on construction and written
    back after every change.
    """

    adapter: ClassVar[TypeAdapter]

    def __init__(self, max_items: int = DEFAULT_MAX_ITEMS, path: Path | None = None) -> None:
        if max_items < 1:
            raise ValueError(f"max_items must be at least 1, got {max_items}")
        self.max_items = max_items
        self.path = path
        self._items: list[ItemT] = self._load()

    def __len__(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        """Remove every entry."""
        self._items.clear()
        self._save()

    def _insert(self, item: ItemT) -> None:
        self._items.insert(0, item)
        del self._items[self.max_items :]
        self._save()

    def _load(self) -> list[ItemT]:
        if self.path is None or not self.path.exists():
            return []
        try:
            items: list[ItemT] = self.adapter.validate_json(self.path.read_bytes())
        except (OSError, ValidationError) as e:
            logger.warning(f"Ignoring unreadable store file {self.path}: {e}")
            return []
        logger.debug(f"Loaded {len(items)} entries from {self.path}")
        return items[: self.max_items]

    def _save(self) -> None:
        if self.path is None:
            return
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_bytes(self.adapter.dump_json(self._items, indent=2))
        except OSError as e:
            logger.error(f"Failed to write store file {self.path}: {e}")
            raise StoreError(f"Could not save {self.path}: {e}") from e


class ConversionHistory(_JsonListStore[ConversionRecord]):
    """Recent conversions, newest first."""

    adapter = TypeAdapter(list[ConversionRecord])

    @property
    def records(self) -> tuple[ConversionRecord, ...]:
        return tuple(self._items)

    def add(self, input: str, input_suffix: str, result: str, result_suffix: str) -> None:
        """Record a conversion. Blank inputs or results are ignored."""
        if not input.strip() or not result.strip():
            return
        self._insert(
            ConversionRecord(
                input=input,
                input_suffix=input_suffix,
                result=result,
                result_suffix=result_suffix,
            )
        )


class FavoritesStore(_JsonListStore[FavoriteConversion]):
    """Pinned conversions, newest first, without duplicates."""

    adapter = TypeAdapter(list[FavoriteConversion])

    @property
    def favorites(self) -> tuple[FavoriteConversion, ...]:
        return tuple(self._items)

    def find(
        self, input: str, input_suffix: str, result: str, result_suffix: str
    ) -> FavoriteConversion | None:
        """Return the favorite holding this conversion, if any."""
        for favorite in self._items:
            if favorite.matches(input, input_suffix, result, result_suffix):
                return favorite
        return None

    def is_favorited(self, input: str, input_suffix: str, result: str, result_suffix: str) -> bool:
        return self.find(input, input_suffix, result, result_suffix) is not None

    def add(self, input: str, input_suffix: str, result: str, result_suffix: str) -> None:
        """Pin a conversion unless an identical one is already pinned."""
        if self.is_favorited(input, input_suffix, result, result_suffix):
            return
        self._insert(
            FavoriteConversion(
                input=input,
                input_suffix=input_suffix,
                result=result,
                result_suffix=result_suffix,
            )
        )

    def remove(self, favorite_id: UUID) -> None:
        """Unpin by id. Unknown ids are ignored."""
        self._items = [f for f in self._items if f.id != favorite_id]
        self._save()

    def toggle(self, input: str, input_suffix: str, result: str, result_suffix: str) -> bool:
        """
        Pin the conversion, or unpin it if already pinned.

        Returns:
            True if the conversion is pinned afterwards
        """
        existing = self.find(input, input_suffix, result, result_suffix)
        if existing is not None:
            self.remove(existing.id)
            return False
        self.add(input, input_suffix, result, result_suffix)
        return True
