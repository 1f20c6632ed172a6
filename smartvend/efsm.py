"""The platform-independent state machine that drives a vending machine."""

from __future__ import annotations

from smartvend.datastore import DataStore
from smartvend.output import OutputProcessor
from smartvend.states import CoinsInserted, Idle, NoCups, State


class MdaEfsm:
    """Extended finite state machine delegating each event to its current state."""

    def __init__(self, ds: DataStore, op: OutputProcessor | None = None) -> None:
        self.ds = ds
        self.op = op if op is not None else OutputProcessor()
        self.idle_state = Idle(self)
        self.no_cups_state = NoCups(self)
        self.coins_inserted_state = CoinsInserted(self)
        self.state: State = self.no_cups_state

    def change_state(self, state: State) -> None:
        """Make ``state`` the current state."""
        self.state = state

    @property
    def state_name(self) -> str:
        """Name of the current state, or "Unknown" for a foreign state."""
        own = (self.idle_state, self.no_cups_state, self.coins_inserted_state)
        return self.state.name if any(self.state is s for s in own) else "Unknown"

    def create(self) -> None:
        """Create the machine with the pending price."""
        self.state.create()

    def insert_cups(self, n: int) -> None:
        """Load ``n`` cups."""
        self.state.insert_cups(n)

    def coin(self, v: float) -> None:
        """Handle a coin of value ``v``."""
        self.state.coin(v)

    def card(self, x: float) -> None:
        """Handle a card payment of ``x``."""
        self.state.card(x)

    def set_price(self, p: float) -> None:
        """Handle a request for a new price."""
        self.state.set_price(p)

    def cancel(self) -> None:
        """Cancel the current purchase."""
        self.state.cancel()

    def cappuccino(self) -> None:
        """Ask for a cappuccino."""
        self.state.cappuccino()

    def chocolate(self) -> None:
        """Ask for a chocolate."""
        self.state.chocolate()

    def sugar(self) -> None:
        """Ask for sugar."""
        self.state.sugar()