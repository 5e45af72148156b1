"""Application use cases."""

from stockledger.application.use_cases.add_supply import AddSupplyUseCase
from stockledger.application.use_cases.create_stock_item import (
    CreateStockItemResult,
    CreateStockItemUseCase,
)
from stockledger.application.use_cases.delete_stock_item import DeleteStockItemUseCase
from stockledger.application.use_cases.edit_stock_item import EditStockItemUseCase
from stockledger.application.use_cases.export_supply_history import (
    ExportResult,
    ExportSupplyHistoryUseCase,
)
from stockledger.application.use_cases.list_orders import ListOrdersUseCase
from stockledger.application.use_cases.place_order import PlaceOrderUseCase
from stockledger.application.use_cases.search_stock import SearchStockUseCase
from stockledger.application.use_cases.supply_history import GetSupplyHistoryUseCase
from stockledger.application.use_cases.toggle_price_lock import TogglePriceLockUseCase
from stockledger.application.use_cases.update_order_status import (
    UpdateOrderStatusUseCase,
)

__all__ = [
    "CreateStockItemUseCase",
    "CreateStockItemResult",
    "EditStockItemUseCase",
    "AddSupplyUseCase",
    "TogglePriceLockUseCase",
    "DeleteStockItemUseCase",
    "SearchStockUseCase",
    "GetSupplyHistoryUseCase",
    "ExportSupplyHistoryUseCase",
    "ExportResult",
    "PlaceOrderUseCase",
    "UpdateOrderStatusUseCase",
    "ListOrdersUseCase",
]
