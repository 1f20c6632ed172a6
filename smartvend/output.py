"""Routing of machine actions to the configured output strategies."""

from __future__ import annotations

from dataclasses import dataclass

from smartvend.strategies import (
    CreateMessage,
    DisposeAdditives,
    DisposeDrink,
    ReturnCoins,
    SetPrice,
    StorePrice,
)


@dataclass
class OutputProcessor:
    """Forwards each action to its strategy.

    An action whose strategy is missing does nothing, except storing a
    price, which reports that no strategy is configured.
    """

    creator: CreateMessage | None = None
    drink_dispenser: DisposeDrink | None = None
    additive_dispenser: DisposeAdditives | None = None
    price_setter: SetPrice | None = None
    refunder: ReturnCoins | None = None
    price_storer: StorePrice | None = None

    def create(self) -> None:
        """Announce that the machine was created."""
        if self.creator is not None:
            self.creator.create_msg()

    def dispose_drink(self) -> None:
        """Dispense a drink."""
        if self.drink_dispenser is not None:
            self.drink_dispenser.dispose_drink()

    def dispose_additives(self) -> None:
        """Dispense the selected additives."""
        if self.additive_dispenser is not None:
            self.additive_dispenser.dispose_additives()

    def set_price(self, price: float) -> None:
        """Apply ``price`` through the price strategy."""
        if self.price_setter is not None:
            self.price_setter.set_price(price)

    def return_coins(self) -> None:
        """Refund the funds held."""
        if self.refunder is not None:
            self.refunder.return_coins()

    def store_price(self) -> None:
        """Move the pending price into the stored price."""
        if self.price_storer is not None:
            self.price_storer.store_price()
        else:
            print("[OP] StorePrice not configured.")