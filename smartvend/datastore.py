"""Storage for the values a vending machine tracks between operations."""

from __future__ import annotations

from abc import ABC, abstractmethod

_ADDITIVE_SLOTS = 2


class DataStore(ABC):
    """Holds funds, prices, the cup count and additive flags.

    Monetary values pass through :meth:`_coerce`, so each concrete store
    decides how amounts are kept: as floats or as truncated integers.
    """

    def __init__(self) -> None:
        self._cf = self._coerce(0)
        self._price = self._coerce(0)
        self._temp_p = self._coerce(0)
        self.cups: int = 0
        self._additives = [0] * _ADDITIVE_SLOTS

    @staticmethod
    @abstractmethod
    def _coerce(value: float) -> float | int:
        """Convert an incoming amount to the store's representation."""

    @property
    def cf(self) -> float:
        """Funds inserted so far."""
        return float(self._cf)

    @cf.setter
    def cf(self, value: float) -> None:
        self._cf = self._coerce(value)

    @property
    def price(self) -> float:
        """Price of a drink."""
        return float(self._price)

    @price.setter
    def price(self, value: float) -> None:
        self._price = self._coerce(value)

    @property
    def temp_p(self) -> float:
        """Price waiting to be stored."""
        return float(self._temp_p)

    @temp_p.setter
    def temp_p(self, value: float) -> None:
        self._temp_p = self._coerce(value)

    def get_additive(self, index: int) -> int:
        """Return the flag for additive ``index`` (0 sugar, 1 cream); 0 if out of range."""
        if 0 <= index < _ADDITIVE_SLOTS:
            return self._additives[index]
        return 0

    def set_additive(self, index: int, value: int) -> None:
        """Set the flag for additive ``index``; indices out of range are ignored."""
        if 0 <= index < _ADDITIVE_SLOTS:
            self._additives[index] = value


class FloatDataStore(DataStore):
    """Data store keeping amounts as floats."""

    @staticmethod
    def _coerce(value: float) -> float:
        return float(value)


class IntDataStore(DataStore):
    """Data store keeping amounts as whole units, truncating toward zero."""

    @staticmethod
    def _coerce(value: float) -> int:
        return int(value)