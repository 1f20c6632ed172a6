"""Payment and output strategies used by the vending machines."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from smartvend.datastore import DataStore


def _fmt(value: float) -> str:
    """Format a number the way a default-precision stream would."""
    return f"{value:g}"


def _say(text: str) -> str:
    """Print ``text`` and hand it back to the caller."""
    print(text)
    return text


def _report_sugar(tag: str, ds: DataStore) -> str:
    if ds.get_additive(0):
        return _say(f"[{tag}] Dispensing sugar...")
    return _say(f"[{tag}] No additives to dispense.")


def _report_refund(tag: str, ds: DataStore) -> str:
    if ds.cf > 0:
        return _say(f"[{tag}] Returning {_fmt(ds.cf)} units as refund to user.")
    return _say(f"[{tag}] No remaining funds to return.")


def _store(tag: str, ds: DataStore, shown: Callable[[float], object]) -> str:
    price = ds.temp_p
    ds.price = price
    return _say(f"[{tag}] Stored price: {shown(price)} units into DataStore.")


class _StoreBound:
    """Keeps the data store a strategy reads from or writes to."""

    def __init__(self, ds: DataStore | None = None) -> None:
        self.ds = ds


class PaymentStrategy(ABC):
    """Applies a payment to a data store."""

    @abstractmethod
    def pay(self, ds: DataStore, amount: float) -> bool:
        """Apply ``amount`` to ``ds``; return whether the payment was accepted."""


class CoinPayment(PaymentStrategy):
    """Adds each coin to the funds already inserted."""

    def pay(self, ds: DataStore, amount: float) -> bool:
        ds.cf = ds.cf + amount
        _say(f"[CoinPayment] Inserted coin: {_fmt(amount)}. Total: {_fmt(ds.cf)}")
        return True


class CardPayment(PaymentStrategy):
    """Accepts a card only when it covers the price."""

    def pay(self, ds: DataStore, amount: float) -> bool:
        accepted = amount >= ds.price
        ds.cf = amount if accepted else 0
        _say("[CardPayment] Payment accepted." if accepted else "[CardPayment] Insufficient balance.")
        return accepted


class CreateMessage(ABC):
    """Announces that a machine was created."""

    @abstractmethod
    def create_msg(self) -> str:
        """Announce creation and return the announcement."""


class CreateMessage1(_StoreBound, CreateMessage):
    def create_msg(self) -> str:
        return _say("[CreateMsg1] Vending Machine Created Successfully!")


class DisposeDrink(ABC):
    """Dispenses a drink."""

    @abstractmethod
    def dispose_drink(self) -> str:
        """Dispense the drink and return the report."""


class DisposeDrink1(_StoreBound, DisposeDrink):
    def dispose_drink(self) -> str:
        return _say("[DisposeDrink1] Dispensing drink...")


class DisposeDrink2(DisposeDrink):
    def dispose_drink(self) -> str:
        return _say("[DisposeDrink2] Dispensing drink...")


class DisposeAdditives(ABC):
    """Dispenses the selected additives."""

    @abstractmethod
    def dispose_additives(self) -> str:
        """Dispense the additives and return the report."""


class DisposeAdditives1(_StoreBound, DisposeAdditives):
    def dispose_additives(self) -> str:
        return _report_sugar("DisposeAdditives1", self.ds)


class DisposeAdditives2(_StoreBound, DisposeAdditives):
    def dispose_additives(self) -> str:
        return _report_sugar("DisposeAdditives2", self.ds)


class SetPrice(ABC):
    """Handles a new price."""

    @abstractmethod
    def set_price(self, price: float) -> str:
        """Apply ``price`` and return the report."""


class SetPrice1(_StoreBound, SetPrice):
    """Writes the price to the data store."""

    def set_price(self, price: float) -> str:
        self.ds.price = price
        return _say(f"[SetPrice1] Price set to: {_fmt(price)} units.")


class SetPrice2(SetPrice):
    """Reports the price in whole units."""

    def set_price(self, price: float) -> str:
        return _say(f"[SetPrice2] Price set to: {int(price)} units (VM2).")


class ReturnCoins(ABC):
    """Refunds the funds held."""

    @abstractmethod
    def return_coins(self) -> str:
        """Refund the funds and return the report."""


class ReturnCoins1(_StoreBound, ReturnCoins):
    def return_coins(self) -> str:
        return _report_refund("ReturnCoins1", self.ds)


class ReturnCoins2(_StoreBound, ReturnCoins):
    def return_coins(self) -> str:
        return _report_refund("ReturnCoins2", self.ds)


class StorePrice(ABC):
    """Moves the pending price into the stored price."""

    @abstractmethod
    def store_price(self) -> str:
        """Store the pending price and return the report."""


class StorePrice1(_StoreBound, StorePrice):
    def store_price(self) -> str:
        return _store("StorePrice1", self.ds, _fmt)


class StorePrice2(_StoreBound, StorePrice):
    def store_price(self) -> str:
        return _store("StorePrice2", self.ds, int)