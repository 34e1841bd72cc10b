"""Units of measure and quantities of weight, volume and temperature."""

from __future__ import annotations

from typing import Callable, ClassVar, Dict, Optional, TypeVar

Conversion = Callable[[float], float]

_UNITS: Dict[str, "Unit"] = {}

Q = TypeVar("Q", bound="Quantity")


class Unit:
    """A named unit of measure that knows how to convert into other units."""

    def __init__(self, name: str, symbol: str) -> None:
        self.name = name
        self.symbol = symbol
        self._conversions: Dict[str, Conversion] = {}
        _UNITS[symbol] = self

    def add_conversion(self, other: "Unit", func: Conversion) -> None:
        """Register how an amount of this unit becomes an amount of ``other``."""
        self._conversions[other.name] = func

    def convertable(self, other: "Unit") -> bool:
        """Whether an amount of this unit can be expressed in ``other``."""
        return other.name == self.name or other.name in self._conversions

    def convert(self, amount: float, other: "Unit") -> float:
        """Express ``amount`` of this unit in ``other``; 0.0 if there is no conversion."""
        if other.name == self.name:
            return amount
        func = self._conversions.get(other.name)
        if func is None:
            return 0.0
        return func(amount)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Unit):
            return NotImplemented
        return self.name == other.name and self.symbol == other.symbol

    def __hash__(self) -> int:
        return hash((self.name, self.symbol))

    def __repr__(self) -> str:
        return f"Unit({self.name!r}, {self.symbol!r})"


def lookup_unit(symbol: str) -> Optional[Unit]:
    """Return the unit registered under ``symbol``, or None."""
    return _UNITS.get(symbol)


def _parse_amount(text: str) -> float:
    text = text.strip()
    if not text or "_" in text:
        return 0.0
    try:
        return float(text)
    except ValueError:
        return 0.0


class Quantity:
    """An amount together with the unit it is measured in."""

    generic: ClassVar[Unit] = Unit("unit", "unit")
    default_unit: ClassVar[Unit] = generic

    def __init__(self, amount: float = 0.0, unit: Optional[Unit] = None) -> None:
        self.amount = float(amount)
        self.unit = unit if unit is not None else type(self).default_unit

    @classmethod
    def from_quantity(cls: type[Q], other: "Quantity") -> Q:
        """Build an instance of this class holding the same amount and unit."""
        return cls(other.amount, other.unit)

    def amount_in(self, unit: Unit) -> float:
        """Return the amount expressed in ``unit``."""
        return self.unit.convert(self.amount, unit)

    def convert(self, unit: Unit) -> None:
        """Convert this quantity in place to ``unit``."""
        self.amount = self.unit.convert(self.amount, unit)
        self.unit = unit

    def to_string(self, prec: int = 2) -> str:
        """Format as ``"<amount> <symbol>"`` with ``prec`` decimals."""
        return f"{self.amount:.{prec}f} {self.unit.symbol}"

    @classmethod
    def from_string(cls: type[Q], text: str, default_unit: Optional[Unit] = None) -> Q:
        """Parse ``"<amount> <symbol>"``; unknown symbols fall back to the default unit."""
        if default_unit is None:
            default_unit = cls.default_unit
        head, _, tail = text.partition(" ")
        unit = lookup_unit(tail) or default_unit
        return cls(_parse_amount(head), unit)

    def _copy(self: Q) -> Q:
        return type(self)(self.amount, self.unit)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.amount == other.amount and self.unit.symbol == other.unit.symbol

    __hash__ = None  # type: ignore[assignment]

    def __add__(self: Q, other: object) -> Q:
        result = self._copy()
        if isinstance(other, Quantity):
            if other.unit.convertable(result.unit):
                result.amount += other.unit.convert(other.amount, result.unit)
            return result
        if isinstance(other, (int, float)):
            result.amount += other
            return result
        return NotImplemented

    def __radd__(self: Q, other: object) -> Q:
        if isinstance(other, (int, float)):
            return self + other
        return NotImplemented

    def __sub__(self: Q, other: object) -> Q:
        result = self._copy()
        if isinstance(other, Quantity):
            if other.unit.convertable(result.unit):
                result.amount -= other.unit.convert(other.amount, result.unit)
            return result
        if isinstance(other, (int, float)):
            result.amount -= other
            return result
        return NotImplemented

    def __rsub__(self: Q, other: object) -> Q:
        if isinstance(other, (int, float)):
            result = self._copy()
            result.amount = other - result.amount
            return result
        return NotImplemented

    def __neg__(self: Q) -> Q:
        result = self._copy()
        result.amount *= -1.0
        return result

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.amount!r}, {self.unit.symbol!r})"


class Weight(Quantity):
    """A quantity of weight; pounds by default."""

    gram: ClassVar[Unit] = Unit("gram", "g")
    kilogram: ClassVar[Unit] = Unit("kilogram", "kg")
    ounce: ClassVar[Unit] = Unit("ounce", "oz")
    pound: ClassVar[Unit] = Unit("pound", "lb")
    default_unit: ClassVar[Unit] = pound


class Volume(Quantity):
    """A quantity of volume; gallons by default."""

    barrel: ClassVar[Unit] = Unit("barrel", "bbl")
    gallon: ClassVar[Unit] = Unit("gallon", "gal")
    hectoliter: ClassVar[Unit] = Unit("hectoliter", "hL")
    liter: ClassVar[Unit] = Unit("liter", "L")
    milliliter: ClassVar[Unit] = Unit("milliliter", "mL")
    fluidounce: ClassVar[Unit] = Unit("fluid ounce", "fl oz")
    default_unit: ClassVar[Unit] = gallon


class Temperature(Quantity):
    """A temperature; degrees Fahrenheit by default."""

    fahrenheit: ClassVar[Unit] = Unit("fahrenheit", "F")
    celsius: ClassVar[Unit] = Unit("celsius", "C")
    default_unit: ClassVar[Unit] = fahrenheit


def fahrenheit_to_celsius(value: float) -> float:
    """Convert degrees Fahrenheit to degrees Celsius."""
    return (value - 32.0) / 1.8


def celsius_to_fahrenheit(value: float) -> float:
    """Convert degrees Celsius to degrees Fahrenheit."""
    return (value * 1.8) + 32.0


def _mul(factor: float) -> Conversion:
    return lambda value: value * factor


def _div(factor: float) -> Conversion:
    return lambda value: value / factor


_W, _V = Weight, Volume

_CONVERSIONS = [
    (_W.gram, _W.kilogram, _div(1000.0)),
    (_W.gram, _W.ounce, _div(28.349523125)),
    (_W.gram, _W.pound, _div(453.59237)),
    (_W.kilogram, _W.gram, _mul(1000.0)),
    (_W.kilogram, _W.ounce, _mul(35.27396)),
    (_W.kilogram, _W.pound, _mul(2.2046226)),
    (_W.ounce, _W.gram, _mul(28.349523125)),
    (_W.ounce, _W.kilogram, _div(35.27396)),
    (_W.ounce, _W.pound, _div(16.0)),
    (_W.pound, _W.gram, _mul(453.59237)),
    (_W.pound, _W.kilogram, _div(2.2046226)),
    (_W.pound, _W.ounce, _mul(16.0)),
    (_V.barrel, _V.fluidounce, _mul(3968.0)),
    (_V.barrel, _V.gallon, _mul(31.0)),
    (_V.barrel, _V.hectoliter, _mul(1.173477658)),
    (_V.barrel, _V.liter, _mul(117.3477658)),
    (_V.barrel, _V.milliliter, _mul(117347.7658)),
    (_V.fluidounce, _V.barrel, _div(3968.0)),
    (_V.fluidounce, _V.gallon, _div(128.0)),
    (_V.fluidounce, _V.hectoliter, _div(3381.4016)),
    (_V.fluidounce, _V.liter, _div(33.814016)),
    (_V.fluidounce, _V.milliliter, _mul(29.5735)),
    (_V.gallon, _V.barrel, _div(31.0)),
    (_V.gallon, _V.fluidounce, _mul(128.0)),
    (_V.gallon, _V.hectoliter, _div(26.4172)),
    (_V.gallon, _V.liter, _mul(3.7854118)),
    (_V.gallon, _V.milliliter, _mul(3785.4118)),
    (_V.hectoliter, _V.barrel, _div(1.173477658)),
    (_V.hectoliter, _V.fluidounce, _mul(3381.4016)),
    (_V.hectoliter, _V.gallon, _mul(26.4172)),
    (_V.hectoliter, _V.liter, _mul(100.0)),
    (_V.hectoliter, _V.milliliter, _mul(100000.0)),
    (_V.liter, _V.barrel, _div(117.3477658)),
    (_V.liter, _V.fluidounce, _mul(33.814016)),
    (_V.liter, _V.gallon, _div(3.7854118)),
    (_V.liter, _V.hectoliter, _div(100.0)),
    (_V.liter, _V.milliliter, _mul(1000.0)),
    (_V.milliliter, _V.barrel, _div(117347.7658)),
    (_V.milliliter, _V.fluidounce, _div(29.5735)),
    (_V.milliliter, _V.gallon, _div(3785.4118)),
    (_V.milliliter, _V.hectoliter, _div(100000.0)),
    (_V.milliliter, _V.liter, _div(1000.0)),
    (Temperature.fahrenheit, Temperature.celsius, fahrenheit_to_celsius),
    (Temperature.celsius, Temperature.fahrenheit, celsius_to_fahrenheit),
]

for _source, _target, _func in _CONVERSIONS:
    _source.add_conversion(_target, _func)

del _source, _target, _func