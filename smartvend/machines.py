"""The two vending machines built on the shared state machine."""

from __future__ import annotations

from smartvend.datastore import DataStore
from smartvend.efsm import MdaEfsm
from smartvend.factory import AbstractFactory, VM1Factory, VM2Factory
from smartvend.states import TransitionError


class VM1:
    """Machine working in fractional amounts, selling cappuccino and chocolate."""

    def __init__(self, factory: AbstractFactory | None = None) -> None:
        if factory is None:
            factory = VM1Factory()
        self.ds: DataStore = factory.create_data_store()
        self.efsm = MdaEfsm(self.ds, factory.create_output_processor())
        self._coin_payment = factory.create_coin_payment()
        self._card_payment = factory.create_card_payment()

    @property
    def state_name(self) -> str:
        """Name of the current state."""
        return self.efsm.state_name

    def create(self, price: float) -> None:
        """Set up the machine with ``price``."""
        self.ds.temp_p = price
        self.efsm.create()

    def insert_cups(self, n: int) -> None:
        """Add ``n`` cups."""
        self.efsm.insert_cups(n)

    def coin(self, v: float) -> None:
        """Insert a coin worth ``v``."""
        self._coin_payment.pay(self.ds, v)
        self.efsm.coin(v)

    def card(self, x: float) -> None:
        """Pay by card with value ``x``."""
        self._card_payment.pay(self.ds, x)
        self.efsm.card(x)

    def set_price(self, p: float) -> None:
        """Request a new price ``p``."""
        self.ds.temp_p = p
        self.efsm.set_price(p)

    def sugar(self) -> None:
        self.efsm.sugar()

    def cappuccino(self) -> None:
        self.efsm.cappuccino()

    def chocolate(self) -> None:
        self.efsm.chocolate()

    def cancel(self) -> None:
        self.efsm.cancel()


class VM2:
    """Machine working in whole units, selling coffee with sugar or cream."""

    def __init__(self, factory: AbstractFactory | None = None) -> None:
        if factory is None:
            factory = VM2Factory()
        self._factory = factory
        self.ds: DataStore = factory.create_data_store()
        self.efsm = MdaEfsm(self.ds, factory.create_output_processor())

    @property
    def state_name(self) -> str:
        """Name of the current state."""
        return self.efsm.state_name

    def create(self, p: int) -> None:
        """Set up the machine with price ``p``."""
        self.ds.temp_p = p
        self.efsm.create()

    def coin(self, v: int) -> None:
        """Insert a coin worth ``v``."""
        self._factory.create_coin_payment().pay(self.ds, v)
        self.efsm.coin(v)

    def card(self, x: int) -> None:
        """Pay by card with value ``x``."""
        self._factory.create_card_payment().pay(self.ds, x)
        self.efsm.card(x)

    def sugar(self) -> None:
        self.efsm.sugar()

    def cream(self) -> None:
        """Add cream; only allowed once enough has been paid."""
        if self.efsm.state is not self.efsm.coins_inserted_state:
            raise TransitionError("cream", self.efsm.state_name)
        self.ds.set_additive(1, 1)
        print("[CoinsInserted] Cream added.")

    def coffee(self) -> None:
        """Dispense coffee, the machine's drink."""
        self.efsm.cappuccino()

    def insert_cups(self, n: int) -> None:
        """Add ``n`` cups."""
        self.efsm.insert_cups(n)

    def set_price(self, p: int) -> None:
        """Request a new price ``p``."""
        self.ds.temp_p = p
        self.efsm.set_price(p)

    def cancel(self) -> None:
        self.efsm.cancel()