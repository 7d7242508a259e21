"""Module including value objects used across the domain layer."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Price:
    """Value object representing a monetary amount in the smallest currency unit.

    Zero is allowed here; non-positive prices are rejected by command validation
    before any event is created.
    """

    amount: int = 0

    def __add__(self, other: "Price") -> "Price":
        if not isinstance(other, Price):
            return NotImplemented
        return Price(self.amount + other.amount)

    def __mul__(self, factor: int) -> "Price":
        if not isinstance(factor, int):
            return NotImplemented
        return Price(self.amount * factor)

    __rmul__ = __mul__
