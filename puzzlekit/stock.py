"""A stock price record that accepts corrections of earlier prices."""

from __future__ import annotations

from heapq import heappop, heappush


class StockPrice:
    """Track prices by timestamp, with the latest, highest and lowest price."""

    def __init__(self) -> None:
        self._prices: dict[int, int] = {}
        self._low: list[tuple[int, int]] = []
        self._high: list[tuple[int, int]] = []
        self._latest: int | None = None

    def update(self, timestamp: int, price: int) -> None:
        """Record the price at a timestamp, replacing any earlier record."""
        self._prices[timestamp] = price
        heappush(self._low, (price, timestamp))
        heappush(self._high, (-price, timestamp))
        if self._latest is None or timestamp > self._latest:
            self._latest = timestamp

    def _require_prices(self) -> None:
        if self._latest is None:
            raise LookupError("no prices have been recorded")

    def current(self) -> int:
        """Return the price at the latest timestamp."""
        self._require_prices()
        return self._prices[self._latest]

    def maximum(self) -> int:
        """Return the highest price currently on record."""
        self._require_prices()
        while self._prices[self._high[0][1]] != -self._high[0][0]:
            heappop(self._high)
        return -self._high[0][0]

    def minimum(self) -> int:
        """Return the lowest price currently on record."""
        self._require_prices()
        while self._prices[self._low[0][1]] != self._low[0][0]:
            heappop(self._low)
        return self._low[0][0]