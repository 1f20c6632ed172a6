"""Factories that assemble the parts of each kind of vending machine."""

from __future__ import annotations

from abc import ABC, abstractmethod

from smartvend.datastore import DataStore, FloatDataStore, IntDataStore
from smartvend.output import OutputProcessor
from smartvend import strategies as st


class AbstractFactory(ABC):
    """Creates the data store, payment strategies and output strategies of a machine.

    Every factory owns one data store; the strategies it creates share it.
    """

    @abstractmethod
    def create_data_store(self) -> DataStore:
        """Return the data store shared by this factory's products."""

    def create_coin_payment(self) -> st.PaymentStrategy:
        """Return a new coin payment strategy."""
        return st.CoinPayment()

    def create_card_payment(self) -> st.PaymentStrategy:
        """Return a new card payment strategy."""
        return st.CardPayment()

    @abstractmethod
    def create_create_msg(self) -> st.CreateMessage:
        """Return the strategy announcing creation."""

    @abstractmethod
    def create_dispose_drink(self) -> st.DisposeDrink:
        """Return the drink dispensing strategy."""

    @abstractmethod
    def create_dispose_additives(self) -> st.DisposeAdditives:
        """Return the additive dispensing strategy."""

    @abstractmethod
    def create_set_price(self) -> st.SetPrice:
        """Return the price setting strategy."""

    @abstractmethod
    def create_return_coins(self) -> st.ReturnCoins:
        """Return the refund strategy."""

    @abstractmethod
    def create_store_price(self) -> st.StorePrice:
        """Return the price storing strategy."""

    def create_output_processor(self) -> OutputProcessor:
        """Return an output processor wired with this factory's strategies."""
        return OutputProcessor(
            creator=self.create_create_msg(),
            drink_dispenser=self.create_dispose_drink(),
            additive_dispenser=self.create_dispose_additives(),
            price_setter=self.create_set_price(),
            refunder=self.create_return_coins(),
            price_storer=self.create_store_price(),
        )


class _SharedStoreFactory(AbstractFactory):
    """Factory holding the single data store its products share."""

    def __init__(self, ds: DataStore) -> None:
        self._ds = ds

    def create_data_store(self) -> DataStore:
        return self._ds


class VM1Factory(_SharedStoreFactory):
    """Parts for the machine that keeps amounts as floats."""

    def __init__(self) -> None:
        super().__init__(FloatDataStore())

    def create_create_msg(self) -> st.CreateMessage:
        return st.CreateMessage1(self._ds)

    def create_dispose_drink(self) -> st.DisposeDrink:
        return st.DisposeDrink1(self._ds)

    def create_dispose_additives(self) -> st.DisposeAdditives:
        return st.DisposeAdditives1(self._ds)

    def create_set_price(self) -> st.SetPrice:
        return st.SetPrice1(self._ds)

    def create_return_coins(self) -> st.ReturnCoins:
        return st.ReturnCoins1(self._ds)

    def create_store_price(self) -> st.StorePrice:
        return st.StorePrice1(self._ds)


class VM2Factory(_SharedStoreFactory):
    """Parts for the machine that keeps amounts as whole units."""

    def __init__(self) -> None:
        super().__init__(IntDataStore())

    def create_create_msg(self) -> st.CreateMessage:
        return st.CreateMessage1()

    def create_dispose_drink(self) -> st.DisposeDrink:
        return st.DisposeDrink2()

    def create_dispose_additives(self) -> st.DisposeAdditives:
        return st.DisposeAdditives2(self._ds)

    def create_set_price(self) -> st.SetPrice:
        return st.SetPrice2()

    def create_return_coins(self) -> st.ReturnCoins:
        return st.ReturnCoins2(self._ds)

    def create_store_price(self) -> st.StorePrice:
        return st.StorePrice2(self._ds)