"""Price-time priority matching of an incoming order against a book."""

from __future__ import annotations

from datetime import datetime

from .entity import Order, OrderBook, OrderSide, OrderType, Trade

_SIDES = (OrderSide.BUY, OrderSide.SELL)
_TYPES = (OrderType.LIMIT, OrderType.MARKET)


def match(order: Order, book: OrderBook) -> list[Trade]:
    """Match ``order`` against ``book`` and return the resulting trades.

    Quantities of the incoming order and of the resting orders it fills are
    reduced in place, and fully filled resting orders leave the book. Any
    remainder of a limit order rests in the book; a market order's remainder
    is dropped. Orders with an unknown side or type, or a non-positive
    quantity, produce no trades and leave the book untouched.
    """
    if order.side not in _SIDES or order.type not in _TYPES or order.quantity <= 0:
        return []

    is_buy = order.side == OrderSide.BUY
    contra_side = OrderSide.SELL if is_buy else OrderSide.BUY
    resting = book.sell_orders if is_buy else book.buy_orders
    trades: list[Trade] = []

    while resting and order.quantity > 0:
        best = resting[0]
        if order.type == OrderType.LIMIT:
            too_far = order.price < best.price if is_buy else order.price > best.price
            if too_far:
                break

        qty = min(order.quantity, best.quantity)
        buy_id, sell_id = (order.id, best.id) if is_buy else (best.id, order.id)
        trades.append(
            Trade(
                buy_order_id=buy_id,
                sell_order_id=sell_id,
                price=best.price,
                quantity=qty,
                timestamp=datetime.now(),
            )
        )
        order.quantity -= qty
        best.quantity -= qty

        if best.quantity == 0:
            book.remove_order(contra_side, 0)

    if order.quantity > 0 and order.type == OrderType.LIMIT:
        book.add_order(order)

    return trades