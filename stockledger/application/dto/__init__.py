"""Data Transfer Objects for the presentation boundary.

Request DTOs: Shape of what callers submit.
Response DTOs: Read models handed back for rendering.
"""

from stockledger.application.dto.requests import (
    AddSupplyRequest,
    EditStockItemRequest,
    OrderListRequest,
    PlaceOrderRequest,
    PriceLockRequest,
    StockItemRequest,
    StockSearchRequest,
    SupplyHistoryRequest,
    UpdateOrderStatusRequest,
)
from stockledger.application.dto.responses import (
    BatchComparisonResponse,
    ClientStockResponse,
    DeleteStockItemResponse,
    ErrorResponse,
    OrderListResponse,
    OrderOperationResponse,
    OrderResponse,
    PriceWarningResponse,
    StockItemResponse,
    StockListResponse,
    StockOperationResponse,
    SupplyEntryResponse,
    SupplyHistoryResponse,
    SupplyPreviewResponse,
)

__all__ = [
    # Requests
    "StockItemRequest",
    "EditStockItemRequest",
    "AddSupplyRequest",
    "PriceLockRequest",
    "StockSearchRequest",
    "SupplyHistoryRequest",
    "PlaceOrderRequest",
    "UpdateOrderStatusRequest",
    "OrderListRequest",
    # Responses
    "ErrorResponse",
    "BatchComparisonResponse",
    "SupplyEntryResponse",
    "StockItemResponse",
    "ClientStockResponse",
    "PriceWarningResponse",
    "StockOperationResponse",
    "SupplyPreviewResponse",
    "StockListResponse",
    "SupplyHistoryResponse",
    "DeleteStockItemResponse",
    "OrderResponse",
    "OrderOperationResponse",
    "OrderListResponse",
]
