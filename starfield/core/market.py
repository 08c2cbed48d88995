"""Market output types: CommodityState and the immutable MarketSnapshot."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, Mapping


@dataclass(frozen=True, slots=True)
class CommodityState:
    """Price and stock of one commodity at one station."""

    price: int
    quantity: int


@dataclass(frozen=True, slots=True)
class MarketSnapshot:
    """Read-only commodity table for one station visit.

    ``timestamp`` is the visit serial the table was generated for. The
    table is wrapped in a MappingProxyType so a baseline can be shared
    freely; trading deltas live elsewhere and are merged with
    :func:`apply_quantity_deltas`.
    """

    timestamp: int
    table: Mapping[str, CommodityState]

    def __post_init__(self) -> None:
        object.__setattr__(self, "table", MappingProxyType(dict(self.table)))

    def get(self, key: str) -> CommodityState | None:
        return self.table.get(key)

    def price_of(self, key: str) -> int | None:
        state = self.table.get(key)
        return state.price if state is not None else None

    def quantity_of(self, key: str) -> int | None:
        state = self.table.get(key)
        return state.quantity if state is not None else None

    def keys(self) -> list[str]:
        return list(self.table)

    def entries(self) -> list[tuple[str, CommodityState]]:
        return list(self.table.items())

    def __contains__(self, key: object) -> bool:
        return key in self.table

    def __iter__(self) -> Iterator[str]:
        return iter(self.table)

    def __len__(self) -> int:
        return len(self.table)


def apply_quantity_deltas(snapshot: MarketSnapshot, deltas: Mapping[str, int]) -> MarketSnapshot:
    """Overlay session trading deltas on a baseline, for display.

    Quantities are floored at 0. Keys absent from the baseline are ignored.
    The baseline is left untouched.
    """
    merged = {
        key: CommodityState(state.price, max(0, state.quantity + deltas.get(key, 0)))
        for key, state in snapshot.table.items()
    }
    return MarketSnapshot(timestamp=snapshot.timestamp, table=merged)
