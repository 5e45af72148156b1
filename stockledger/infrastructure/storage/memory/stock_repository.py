"""In-memory implementation of stock item storage."""

import threading

from stockledger.config import get_logger
from stockledger.core.entities.stock import StockItem
from stockledger.core.exceptions import (
    ConcurrencyConflictError,
    DuplicateStockItemError,
    StockItemNotFoundError,
)
from stockledger.core.interfaces.stock_repository import IStockRepository

logger = get_logger(__name__)


class InMemoryStockRepository(IStockRepository):
    """
    Dict-backed stock item storage.

    Keeps insertion order and guards updates with an optimistic version
    check, so two callers that loaded the same item cannot both write it.
    Stored items are copies; callers never share instances with the store.
    """

    def __init__(self, items: list[StockItem] | None = None):
        self._items: dict[str, StockItem] = {}
        self._lock = threading.Lock()
        for item in items or []:
            self.add(item)

    def add(self, item: StockItem) -> StockItem:
        """Store a new stock item."""
        with self._lock:
            if item.id in self._items:
                raise DuplicateStockItemError(item.id)
            self._items[item.id] = item.model_copy(deep=True)
        logger.info("stock_item_stored", item_id=item.id, name=item.name)
        return item.model_copy(deep=True)

    def get(self, item_id: str) -> StockItem | None:
        """Get stock item by ID."""
        with self._lock:
            item = self._items.get(item_id)
        return item.model_copy(deep=True) if item is not None else None

    def require(self, item_id: str) -> StockItem:
        item = self.get(item_id)
        if item is None:
            raise StockItemNotFoundError(item_id)
        return item

    def update(self, item: StockItem) -> StockItem:
        """Replace a stored item, bumping its version."""
        with self._lock:
            stored = self._items.get(item.id)
            if stored is None:
                raise StockItemNotFoundError(item.id)
            if stored.version != item.version:
                raise ConcurrencyConflictError(item.id, item.version, stored.version)
            saved = item.model_copy(update={"version": item.version + 1}, deep=True)
            self._items[item.id] = saved
        logger.info("stock_item_updated", item_id=item.id, version=saved.version)
        return saved.model_copy(deep=True)

    def delete(self, item_id: str) -> None:
        with self._lock:
            if self._items.pop(item_id, None) is None:
                raise StockItemNotFoundError(item_id)
        logger.info("stock_item_deleted", item_id=item_id)

    def list_items(self) -> list[StockItem]:
        with self._lock:
            items = list(self._items.values())
        return [item.model_copy(deep=True) for item in items]

    def __len__(self) -> int:
        return len(self._items)
