"""States of the vending machine's extended finite state machine."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from smartvend.efsm import MdaEfsm


class TransitionError(RuntimeError):
    """Raised when an operation is not allowed in the current state."""

    def __init__(self, operation: str, state: str) -> None:
        super().__init__(f"{operation}() not allowed in current state.")
        self.operation = operation
        self.state = state


class State:
    """Base state: every operation is refused."""

    name = "State"

    def __init__(self, efsm: MdaEfsm) -> None:
        self.efsm = efsm

    def _refuse(self, operation: str) -> None:
        raise TransitionError(operation, self.name)

    def _add_cups(self, n: int) -> bool:
        """Add ``n`` cups if ``n`` is positive; report whether any were added."""
        if n <= 0:
            return False
        self.efsm.ds.cups += n
        return True

    def create(self) -> None:
        self._refuse("create")

    def insert_cups(self, n: int) -> None:
        self._refuse("insert_cups")

    def coin(self, v: float) -> None:
        self._refuse("coin")

    def card(self, x: float) -> None:
        self._refuse("card")

    def set_price(self, p: float) -> None:
        self._refuse("set_price")

    def cancel(self) -> None:
        self._refuse("cancel")

    def cappuccino(self) -> None:
        self._refuse("cappuccino")

    def chocolate(self) -> None:
        self._refuse("chocolate")

    def sugar(self) -> None:
        self._refuse("sugar")


class Idle(State):
    """Cups are available and no sufficient payment has been made."""

    name = "Idle"

    def _quote(self) -> bool:
        """Announce the price and tell whether the funds cover it."""
        ds = self.efsm.ds
        self.efsm.op.set_price(ds.price)
        return ds.cf >= ds.price

    def insert_cups(self, n: int) -> None:
        if self._add_cups(n):
            print(f"[Idle] Inserted {n} cups. Total: {self.efsm.ds.cups}")
        else:
            print("[Idle] Invalid number of cups.")

    def coin(self, v: float) -> None:
        enough = self._quote()
        print(f"[Idle] Coin inserted. Current funds: {self.efsm.ds.cf:g}")
        if enough:
            self.efsm.change_state(self.efsm.coins_inserted_state)

    def card(self, x: float) -> None:
        self.efsm.ds.cf = x
        if self._quote():
            self.efsm.ds.cf = 0
            print("[Idle] Card accepted. Moving to CoinsInserted state.")
            self.efsm.change_state(self.efsm.coins_inserted_state)
        else:
            print("[Idle] Card value too low.")


class NoCups(State):
    """The machine has no cups; it can be created and refilled."""

    name = "NoCups"

    def create(self) -> None:
        self.efsm.op.store_price()
        self.efsm.op.create()
        self.efsm.change_state(self)

    def insert_cups(self, n: int) -> None:
        if self._add_cups(n):
            print(f"[NoCups] Inserted {n} cups. Transitioning to Idle state.")
            self.efsm.change_state(self.efsm.idle_state)
        else:
            print("[NoCups] Invalid cup amount.")


class CoinsInserted(State):
    """Enough has been paid; a drink can be chosen."""

    name = "CoinsInserted"

    def _clear_payment(self) -> None:
        ds = self.efsm.ds
        ds.cf = 0
        ds.set_additive(0, 0)

    def _dispense(self, drink: str) -> None:
        efsm = self.efsm
        ds = efsm.ds
        if ds.cups <= 0:
            print("[CoinsInserted] No cups left!")
            return

        with_sugar = bool(ds.get_additive(0))
        print(f"[CoinsInserted] Dispensing {drink}{' with sugar' if with_sugar else ''}.")
        efsm.op.dispose_drink()
        if with_sugar:
            efsm.op.dispose_additives()

        ds.cups -= 1
        overpaid = ds.cf - ds.price
        if overpaid > 0:
            ds.cf = overpaid
            efsm.op.return_coins()
        self._clear_payment()

        if ds.cups == 0:
            print("[CoinsInserted] Cups finished. Switching to NoCups state.")
            efsm.change_state(efsm.no_cups_state)
        else:
            efsm.change_state(efsm.idle_state)

    def cappuccino(self) -> None:
        self._dispense("cappuccino")

    def chocolate(self) -> None:
        self._dispense("chocolate")

    def sugar(self) -> None:
        self.efsm.ds.set_additive(0, 1)
        print("[CoinsInserted] Sugar added.")

    def cancel(self) -> None:
        self.efsm.op.return_coins()
        self._clear_payment()
        self.efsm.change_state(self.efsm.idle_state)