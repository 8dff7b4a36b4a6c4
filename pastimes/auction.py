"""Auctions, their bids and an evaluator for the highest and lowest offers."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field

HIGHEST_BID_COUNT = 3

_INITIAL_HIGHEST = float(-(2**31))
_INITIAL_LOWEST = float(2**31 - 1)


@dataclass(frozen=True)
class User:
    """A bidder."""

    name: str

    def first_name(self) -> str:
        """Text before the first space, or the whole name if that is empty."""
        first, _, _ = self.name.partition(" ")
        return first or self.name


@dataclass(frozen=True)
class Bid:
    """An offer made by a user."""

    user: User
    value: float

    def user_name(self) -> str:
        return self.user.name


@dataclass
class Auction:
    """An auction that refuses two bids in a row from the same user."""

    description: str
    _bids: list[Bid] = field(default_factory=list, init=False, repr=False)

    def __init__(self, description: str) -> None:
        self.description = description
        self._bids = []

    @property
    def bids(self) -> tuple[Bid, ...]:
        return tuple(self._bids)

    def add_bid(self, bid: Bid) -> None:
        """Add a bid unless the previous one came from the same user."""
        if self._bids and self._bids[-1].user_name() == bid.user_name():
            return
        self._bids.append(bid)


class Evaluator:
    """Finds the highest and lowest bid values and the top bids of an auction."""

    def __init__(self) -> None:
        self.highest_value = _INITIAL_HIGHEST
        self.lowest_value = _INITIAL_LOWEST
        self.highest_bids: list[Bid] = []

    def evaluate(self, auction: Auction) -> None:
        """Update the extreme values and keep the highest bids of the auction."""
        bids = auction.bids
        for bid in bids:
            self.highest_value = max(self.highest_value, bid.value)
            self.lowest_value = min(self.lowest_value, bid.value)
        ranked = sorted(bids, key=lambda b: b.value, reverse=True)
        self.highest_bids = ranked[:HIGHEST_BID_COUNT]


def main(argv: list[str] | None = None) -> int:
    """Evaluate a small sample auction and print the results."""
    parser = argparse.ArgumentParser(
        prog="auction", description="Evaluate a sample auction."
    )
    parser.parse_args(argv)

    auction = Auction("Opala 76")
    auction.add_bid(Bid(User("Pafuncio"), 1000))
    auction.add_bid(Bid(User("Jurema"), 2000))

    evaluator = Evaluator()
    evaluator.evaluate(auction)

    print(f"Lowest bid R$ {evaluator.lowest_value:g}")
    print(f"Highest bid R$ {evaluator.highest_value:g}")
    for bid in evaluator.highest_bids:
        print(f"{bid.user_name()}, R$ {bid.value:g}")
    return 0