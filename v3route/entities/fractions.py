"""Exact rational arithmetic for prices.

Fraction keeps an unreduced integer numerator/denominator pair so products
stay exact regardless of magnitude. Price is a Fraction tagged with the two
currencies it relates: one unit of base_currency is worth numerator /
denominator units of quote_currency (raw, before decimal adjustment).

Formatting never goes through floats:
- to_fixed uses integer division and rounds the remainder explicitly
- to_significant uses a decimal context sized to the requested digits,
  where division is correctly rounded
"""

from __future__ import annotations

import decimal
from decimal import Decimal
from math import gcd
from typing import TYPE_CHECKING, Generic, TypeVar

from v3route.config import DEFAULT_FORMAT_CONFIG
from v3route.constants import Rounding
from v3route.errors import ZeroDenominatorError

if TYPE_CHECKING:
    from v3route.entities.currency import Currency

TBase = TypeVar("TBase", bound="Currency")
TQuote = TypeVar("TQuote", bound="Currency")
TOther = TypeVar("TOther", bound="Currency")


class Fraction:
    """Exact ratio of two integers.

    The sign is carried by the numerator; the denominator is always positive.
    """

    __slots__ = ("_numerator", "_denominator")

    def __init__(self, numerator: int, denominator: int = 1) -> None:
        """Create a fraction.

        Raises:
            TypeError: If numerator or denominator is not an int
            ZeroDenominatorError: If denominator is zero
        """
        for value in (numerator, denominator):
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"Fraction expects int, got {type(value).__name__}")
        if denominator == 0:
            raise ZeroDenominatorError(f"Zero denominator for numerator {numerator}")
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        self._numerator = numerator
        self._denominator = denominator

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    @property
    def quotient(self) -> int:
        """Integer part, rounded toward negative infinity."""
        return self._numerator // self._denominator

    @property
    def remainder(self) -> Fraction:
        """What is left after removing the quotient."""
        return Fraction(self._numerator % self._denominator, self._denominator)

    @property
    def as_fraction(self) -> Fraction:
        """Plain Fraction with the same value (drops any currency tags)."""
        return Fraction(self._numerator, self._denominator)

    def invert(self) -> Fraction:
        return Fraction(self._denominator, self._numerator)

    def add(self, other: Fraction | int) -> Fraction:
        other = _as_fraction(other)
        if self._denominator == other.denominator:
            return Fraction(self._numerator + other.numerator, self._denominator)
        return Fraction(
            self._numerator * other.denominator + other.numerator * self._denominator,
            self._denominator * other.denominator,
        )

    def subtract(self, other: Fraction | int) -> Fraction:
        other = _as_fraction(other)
        return self.add(Fraction(-other.numerator, other.denominator))

    def multiply(self, other: Fraction | int) -> Fraction:
        """Componentwise product, no reduction."""
        other = _as_fraction(other)
        return Fraction(
            self._numerator * other.numerator,
            self._denominator * other.denominator,
        )

    def divide(self, other: Fraction | int) -> Fraction:
        other = _as_fraction(other)
        return Fraction(
            self._numerator * other.denominator,
            self._denominator * other.numerator,
        )

    def less_than(self, other: Fraction | int) -> bool:
        other = _as_fraction(other)
        return self._numerator * other.denominator < other.numerator * self._denominator

    def equal_to(self, other: Fraction | int) -> bool:
        other = _as_fraction(other)
        return self._numerator * other.denominator == other.numerator * self._denominator

    def greater_than(self, other: Fraction | int) -> bool:
        other = _as_fraction(other)
        return self._numerator * other.denominator > other.numerator * self._denominator

    def to_significant(
        self,
        significant_digits: int | None = None,
        rounding: Rounding | None = None,
    ) -> str:
        """Render with at most significant_digits significant digits.

        Trailing zeros are dropped ("0.2", not "0.200000").
        """
        if significant_digits is None:
            significant_digits = DEFAULT_FORMAT_CONFIG.significant_digits
        if rounding is None:
            rounding = DEFAULT_FORMAT_CONFIG.rounding
        if significant_digits < 1:
            raise ValueError(f"significant_digits must be positive: {significant_digits}")

        with decimal.localcontext() as ctx:
            ctx.prec = significant_digits
            ctx.rounding = Rounding(rounding).value
            value = Decimal(self._numerator) / Decimal(self._denominator)
            value = value.normalize()
        return format(value, "f")

    def to_fixed(self, decimal_places: int | None = None, rounding: Rounding | None = None) -> str:
        """Render with exactly decimal_places digits after the point."""
        if decimal_places is None:
            decimal_places = DEFAULT_FORMAT_CONFIG.decimal_places
        if rounding is None:
            rounding = DEFAULT_FORMAT_CONFIG.rounding
        if decimal_places < 0:
            raise ValueError(f"decimal_places cannot be negative: {decimal_places}")
        rounding = Rounding(rounding)

        negative = self._numerator < 0
        scaled, rem = divmod(abs(self._numerator) * 10**decimal_places, self._denominator)
        if rem:
            if rounding is Rounding.ROUND_UP:
                scaled += 1
            elif rounding is Rounding.ROUND_HALF_UP and 2 * rem >= self._denominator:
                scaled += 1

        digits = str(scaled).rjust(decimal_places + 1, "0")
        if decimal_places:
            text = f"{digits[:-decimal_places]}.{digits[-decimal_places:]}"
        else:
            text = digits
        return f"-{text}" if negative and scaled else text

    def __eq__(self, other: object) -> bool:
        # A bare Fraction never equals a Price; currencies are part of its value
        if isinstance(other, Price) and not isinstance(self, Price):
            return NotImplemented
        if isinstance(other, (Fraction, int)) and not isinstance(other, bool):
            return self.equal_to(other)
        return NotImplemented

    def __hash__(self) -> int:
        divisor = gcd(self._numerator, self._denominator)
        numerator, denominator = self._numerator // divisor, self._denominator // divisor
        # Whole values hash like the int they equal
        if denominator == 1:
            return hash(numerator)
        return hash((numerator, denominator))

    def __lt__(self, other: Fraction | int) -> bool:
        return self.less_than(other)

    def __gt__(self, other: Fraction | int) -> bool:
        return self.greater_than(other)

    def __le__(self, other: Fraction | int) -> bool:
        return not self.greater_than(other)

    def __ge__(self, other: Fraction | int) -> bool:
        return not self.less_than(other)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._numerator}/{self._denominator})"


def _as_fraction(value: Fraction | int) -> Fraction:
    if isinstance(value, Fraction):
        return value
    return Fraction(value)


class Price(Fraction, Generic[TBase, TQuote]):
    """Exchange rate between two currencies.

    Args order follows the Uniswap SDK: base, quote, denominator, numerator.
    A price of 5 quote per base is Price(base, quote, 1, 5).
    """

    __slots__ = ("base_currency", "quote_currency", "scalar")

    def __init__(
        self,
        base_currency: TBase,
        quote_currency: TQuote,
        denominator: int,
        numerator: int,
    ) -> None:
        super().__init__(numerator, denominator)
        self.base_currency = base_currency
        self.quote_currency = quote_currency
        # Converts a raw ratio into a human-readable one
        self.scalar = Fraction(10**base_currency.decimals, 10**quote_currency.decimals)

    @property
    def adjusted_for_decimals(self) -> Fraction:
        return Fraction.multiply(self, self.scalar)

    def invert(self) -> Price[TQuote, TBase]:
        return Price(self.quote_currency, self.base_currency, self.numerator, self.denominator)

    def multiply(self, other: Price[TQuote, TOther]) -> Price[TBase, TOther]:  # type: ignore[override]
        """Chain two prices: base->quote times quote->other gives base->other.

        Raises:
            TypeError: If other is not a Price
            ValueError: If other's base is not this price's quote currency
        """
        if not isinstance(other, Price):
            raise TypeError(f"Cannot multiply a Price by {type(other).__name__}")
        if not self.quote_currency.equals(other.base_currency):
            raise ValueError(
                f"Cannot multiply prices: quote {self.quote_currency!r} "
                f"!= base {other.base_currency!r}"
            )
        product = Fraction.multiply(self, other)
        return Price(
            self.base_currency,
            other.quote_currency,
            product.denominator,
            product.numerator,
        )

    def quote(self, amount: int) -> int:
        """Convert a raw base amount into a raw quote amount (floored)."""
        return Fraction.multiply(self, amount).quotient

    def to_significant(
        self,
        significant_digits: int | None = None,
        rounding: Rounding | None = None,
    ) -> str:
        return self.adjusted_for_decimals.to_significant(significant_digits, rounding)

    def to_fixed(self, decimal_places: int | None = None, rounding: Rounding | None = None) -> str:
        return self.adjusted_for_decimals.to_fixed(decimal_places, rounding)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Price):
            return (
                self.base_currency.equals(other.base_currency)
                and self.quote_currency.equals(other.quote_currency)
                and self.equal_to(other)
            )
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.base_currency, self.quote_currency, super().__hash__()))

    def __repr__(self) -> str:
        base = getattr(self.base_currency, "symbol", None)
        quote = getattr(self.quote_currency, "symbol", None)
        return f"Price({self.numerator}/{self.denominator} {quote} per {base})"


__all__ = ["Fraction", "Price", "Rounding"]
