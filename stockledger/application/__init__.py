"""
Application layer - Use cases, DTOs, and service factories.

This layer orchestrates business logic by:
1. Defining request/response DTOs for callers
2. Implementing use cases that coordinate core services and repositories
3. Providing factory functions for dependency injection

Use cases are the only entry point for the CLI.
"""

from stockledger.application.dto import (
    AddSupplyRequest,
    EditStockItemRequest,
    ErrorResponse,
    OrderListRequest,
    OrderListResponse,
    PlaceOrderRequest,
    PriceLockRequest,
    StockItemRequest,
    StockListResponse,
    StockOperationResponse,
    StockSearchRequest,
    SupplyHistoryRequest,
    SupplyHistoryResponse,
    UpdateOrderStatusRequest,
)
from stockledger.application.services import (
    get_csv_exporter,
    get_order_service,
    get_stock_ledger_service,
    reset_services,
    seed_order_repository,
    seed_stock_repository,
)
from stockledger.application.use_cases import (
    AddSupplyUseCase,
    CreateStockItemUseCase,
    DeleteStockItemUseCase,
    EditStockItemUseCase,
    ExportSupplyHistoryUseCase,
    GetSupplyHistoryUseCase,
    ListOrdersUseCase,
    PlaceOrderUseCase,
    SearchStockUseCase,
    TogglePriceLockUseCase,
    UpdateOrderStatusUseCase,
)

__all__ = [
    # Request DTOs
    "StockItemRequest",
    "EditStockItemRequest",
    "AddSupplyRequest",
    "PriceLockRequest",
    "StockSearchRequest",
    "SupplyHistoryRequest",
    "PlaceOrderRequest",
    "UpdateOrderStatusRequest",
    "OrderListRequest",
    # Response DTOs
    "ErrorResponse",
    "StockOperationResponse",
    "StockListResponse",
    "SupplyHistoryResponse",
    "OrderListResponse",
    # Use Cases
    "CreateStockItemUseCase",
    "EditStockItemUseCase",
    "AddSupplyUseCase",
    "TogglePriceLockUseCase",
    "DeleteStockItemUseCase",
    "SearchStockUseCase",
    "GetSupplyHistoryUseCase",
    "ExportSupplyHistoryUseCase",
    "PlaceOrderUseCase",
    "UpdateOrderStatusUseCase",
    "ListOrdersUseCase",
    # Service factories
    "get_stock_ledger_service",
    "get_order_service",
    "get_csv_exporter",
    "seed_stock_repository",
    "seed_order_repository",
    "reset_services",
]
