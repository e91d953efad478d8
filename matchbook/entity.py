"""Orders, trades and the order book that holds resting orders."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class OrderType(str, Enum):
    """How an order is priced."""

    LIMIT = "LIMIT"
    MARKET = "MARKET"


class OrderSide(str, Enum):
    """Which side of the book an order belongs to."""

    BUY = "BUY"
    SELL = "SELL"


@dataclass
class Order:
    """An order to buy or sell a quantity at a price."""

    id: str
    price: float
    quantity: float
    type: OrderType
    side: OrderSide
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass
class Trade:
    """A fill between a buy order and a sell order."""

    buy_order_id: str
    sell_order_id: str
    price: float
    quantity: float
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass
class OrderBook:
    """Resting buy and sell orders, each kept in price-time priority."""

    buy_orders: list[Order] = field(default_factory=list)
    sell_orders: list[Order] = field(default_factory=list)

    def add_order(self, order: Order) -> None:
        """Insert an order on its side and restore priority order.

        Buy orders run from the highest price down, sell orders from the
        lowest price up; at equal prices the earlier order comes first.
        Anything that is not a buy order goes on the sell side.
        """
        if order.side == OrderSide.BUY:
            self.buy_orders.append(order)
            self.buy_orders.sort(key=lambda o: (-o.price, o.timestamp))
        else:
            self.sell_orders.append(order)
            self.sell_orders.sort(key=lambda o: (o.price, o.timestamp))

    def remove_order(self, side: OrderSide, index: int) -> Order:
        """Remove and return the order at ``index`` on the given side."""
        orders = self.buy_orders if side == OrderSide.BUY else self.sell_orders
        if not 0 <= index < len(orders):
            raise IndexError(
                f"order index {index} out of range for {len(orders)} orders"
            )
        return orders.pop(index)