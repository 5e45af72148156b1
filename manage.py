#!/usr/bin/env python3
"""
Stock Ledger management CLI.

Works against the seed catalogue loaded into an in-memory repository.

Usage:
    python manage.py list [--search TERM] [--sort FIELD] [--desc]
    python manage.py low-stock                 Items at or below minimum stock
    python manage.py history ITEM_ID           Supply history for one item
    python manage.py export ITEM_ID [--output DIR]
    python manage.py orders [--status STATUS]  Client order history
"""

import argparse
import sys
from datetime import date
from pathlib import Path

from stockledger.application import (
    ExportSupplyHistoryUseCase,
    GetSupplyHistoryUseCase,
    ListOrdersUseCase,
    OrderListRequest,
    SearchStockUseCase,
    StockSearchRequest,
    SupplyHistoryRequest,
    seed_order_repository,
    seed_stock_repository,
)
from stockledger.config import configure_logging, get_settings
from stockledger.core.entities.order import OrderStatus
from stockledger.core.exceptions import LedgerError
from stockledger.core.services.pricing import format_batch_comparison, format_currency
from stockledger.infrastructure.storage.memory import (
    get_order_repository,
    get_stock_repository,
)


def _should_seed(args: argparse.Namespace) -> bool:
    return args.catalogue is not None or get_settings().catalogue.load_on_start


def _load_repository(args: argparse.Namespace):
    repository = get_stock_repository()
    if _should_seed(args):
        seed_stock_repository(repository, args.catalogue)
    return repository


def _load_order_repository(args: argparse.Namespace):
    repository = get_order_repository()
    if _should_seed(args):
        seed_order_repository(repository, args.catalogue)
    return repository


def _money(amount: float) -> str:
    pricing = get_settings().pricing
    return format_currency(amount, pricing.currency_symbol, pricing.currency_precision)


def _print_items(items) -> None:
    if not items:
        print("No stock items.")
        return
    print(f"{'ID':<10} {'Name':<20} {'Type':<12} {'Qty':>6} {'Cost':>10} {'Price':>10}  Status")
    for item in items:
        lock = " (locked)" if item.is_price_locked else ""
        print(
            f"{item.id:<10} {item.name[:20]:<20} {item.type[:12]:<12} "
            f"{item.quantity:>6g} {_money(item.total_cost):>10} "
            f"{_money(item.selling_price):>10}  {item.stock_status.value}{lock}"
        )


def cmd_list(args: argparse.Namespace) -> None:
    """List stock, optionally searched and sorted."""
    use_case = SearchStockUseCase(_load_repository(args))
    items = use_case.execute(
        StockSearchRequest(
            search_term=args.search,
            sort_field=args.sort,
            sort_order="desc" if args.desc else "asc",
        )
    )
    _print_items(items)


def cmd_low_stock(args: argparse.Namespace) -> None:
    """List items at or below their minimum stock level."""
    use_case = SearchStockUseCase(_load_repository(args))
    request = StockSearchRequest(low_stock_only=True, sort_field="quantity")
    _print_items(use_case.execute(request))


def _history_request(args: argparse.Namespace) -> SupplyHistoryRequest:
    return SupplyHistoryRequest(
        item_id=args.item_id,
        start_date=args.start,
        end_date=args.end,
        supplier=args.supplier,
        sort_by=args.sort_by,
        sort_order="asc" if args.asc else "desc",
    )


def cmd_history(args: argparse.Namespace) -> None:
    """Show an item's supply history."""
    use_case = GetSupplyHistoryUseCase(_load_repository(args))
    entries = use_case.execute(_history_request(args))
    if not entries:
        print("No supply history for this item.")
        return
    for entry in entries:
        line = (
            f"{entry.date:%Y-%m-%d %H:%M}  {entry.entry_type.value:<12} "
            f"qty {entry.quantity:>6g}  cost {_money(entry.total_cost):>10}  "
            f"margin {entry.profit_margin:6.2f}%"
        )
        if entry.supplier:
            line += f"  {entry.supplier}"
        if entry.comparison_to_previous is not None:
            symbol = get_settings().pricing.currency_symbol
            line += f"  [{format_batch_comparison(entry.comparison_to_previous, symbol)}]"
        print(line)
        if entry.notes:
            print(f"    {entry.notes}")


def cmd_export(args: argparse.Namespace) -> None:
    """Export an item's supply history to CSV."""
    use_case = ExportSupplyHistoryUseCase(_load_repository(args))
    result = use_case.execute(_history_request(args), output_dir=args.output)
    if result.path is None:
        sys.stdout.write(result.content)
    else:
        print(f"Wrote {result.rows} rows to {result.path}")


def cmd_orders(args: argparse.Namespace) -> None:
    """Show client order history, newest first."""
    use_case = ListOrdersUseCase(_load_order_repository(args))
    status = OrderStatus(args.status) if args.status else None
    orders = use_case.execute(OrderListRequest(status=status))
    if not orders:
        print("No orders.")
        return
    print(f"{'ID':<10} {'Product':<20} {'Qty':>6} {'Total':>12}  {'Date':<10}  Status")
    for order in orders:
        print(
            f"{order.id[:10]:<10} {order.product_name[:20]:<20} {order.quantity:>6g} "
            f"{_money(order.total_price):>12}  {order.order_date:%Y-%m-%d}  "
            f"{order.status.value}"
        )
    response = use_case.to_response(orders)
    print(f"{response.total} orders, {_money(response.total_value)} total")


def _add_history_filters(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("item_id", help="Stock item ID")
    parser.add_argument("--start", type=date.fromisoformat, help="Start date (YYYY-MM-DD)")
    parser.add_argument("--end", type=date.fromisoformat, help="End date, inclusive (YYYY-MM-DD)")
    parser.add_argument("--supplier", help="Supplier substring")
    parser.add_argument(
        "--sort-by",
        choices=["date", "quantity", "total_cost"],
        default="date",
        help="Sort key (default: date)",
    )
    parser.add_argument("--asc", action="store_true", help="Oldest/smallest first")


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Stock Ledger management CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--catalogue",
        type=Path,
        default=None,
        help="Seed catalogue YAML (default: CATALOGUE_SEED_PATH or bundled seed)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    # list
    p_list = sub.add_parser("list", help="List stock items")
    p_list.add_argument("--search", help="Match name, type or supplier")
    p_list.add_argument("--sort", default="name", help="Sort field (default: name)")
    p_list.add_argument("--desc", action="store_true", help="Descending order")
    p_list.set_defaults(func=cmd_list)

    # low-stock
    p_low = sub.add_parser("low-stock", help="Items at or below minimum stock")
    p_low.set_defaults(func=cmd_low_stock)

    # history
    p_history = sub.add_parser("history", help="Show supply history")
    _add_history_filters(p_history)
    p_history.set_defaults(func=cmd_history)

    # export
    p_export = sub.add_parser("export", help="Export supply history as CSV")
    _add_history_filters(p_export)
    p_export.add_argument("--output", type=Path, help="Directory to write the CSV into")
    p_export.set_defaults(func=cmd_export)

    # orders
    p_orders = sub.add_parser("orders", help="Show client order history")
    p_orders.add_argument(
        "--status",
        choices=[status.value for status in OrderStatus],
        help="Only orders in this status",
    )
    p_orders.set_defaults(func=cmd_orders)

    args = parser.parse_args()
    configure_logging("DEBUG" if args.verbose else None)
    try:
        args.func(args)
    except LedgerError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
