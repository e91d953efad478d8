# matchbook

An in-memory order book with price-time priority matching, plus a small HTTP
server that answers health checks.

## Installation

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Order book and matching

`matchbook.entity` defines `Order`, `Trade`, `OrderType` (`LIMIT`, `MARKET`),
`OrderSide` (`BUY`, `SELL`) and `OrderBook`.

An `OrderBook` holds resting orders in `buy_orders` and `sell_orders`.
`add_order(order)` puts an order on its side and keeps buy orders sorted from
the highest price down and sell orders from the lowest price up. At equal
prices the earlier timestamp comes first. `remove_order(side, index)` removes
and returns the order at that position. It raises `IndexError` if the index
is out of range.

`matchbook.matching.match(order, book)` fills an incoming order against the
other side of the book, best price first, and returns the list of `Trade`
objects it made.

- Each trade is priced at the resting order's price.
- Quantities are reduced in place. Resting orders that are fully filled leave
  the book.
- A limit order stops matching once the price on the other side is worse than
  its limit. Whatever is left of it goes into the book.
- A market order takes whatever liquidity is available. Whatever is left of it
  is dropped.
- An order with an unknown side or type, or a quantity of zero or less,
  makes no trades and leaves the book unchanged.

```python
from matchbook.entity import Order, OrderBook, OrderSide, OrderType
from matchbook.matching import match

book = OrderBook()
book.add_order(Order(id="sell-1", price=100, quantity=5,
                     type=OrderType.LIMIT, side=OrderSide.SELL))

trades = match(Order(id="buy-1", price=101, quantity=3,
                     type=OrderType.LIMIT, side=OrderSide.BUY), book)

trade = trades[0]
print(trade.buy_order_id, trade.sell_order_id, trade.price, trade.quantity)
# buy-1 sell-1 100 3
print(book.sell_orders[0].quantity)
# 2
```

## Health server

    matchbook-server [--host HOST] [--port PORT]

By default this serves HTTP on every interface, port 8080.

- `GET /health/ping` returns `{"message": "pong"}`.
- Any other route returns 404 with the body `404 page not found`.

To stop the server, press Ctrl-C or send SIGTERM. It then runs its cleanup
step, which is a two-second pause, and stops the serving loop. It waits up
to five seconds for that loop to end and then closes the socket.

You can also run the server from your own code. Create
`matchbook.httpserver.HttpServer(host, port)` and call `start()`, which
blocks, from one thread and `stop()` from another. To get a route's response
without starting a server, call `dispatch(method, path)`. `ping()` returns the
health payload as a dict.

## What it does not do

- The order book lives in memory only. Nothing is saved.
- The HTTP server only answers the health check. It has no routes for placing
  orders or viewing the book, and there is no gRPC service.