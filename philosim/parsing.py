"""Command-line argument parsing for the dining philosophers simulation."""

from __future__ import annotations

from dataclasses import dataclass

INT_MAX = 2147483647
MAX_DIGITS = 10
_WHITESPACE = " \t\n\v\f\r"
_DIGITS = frozenset("0123456789")


class ArgumentError(ValueError):
    """Raised when the command-line arguments are unusable."""


@dataclass(frozen=True)
class Config:
    """Parameters of one simulation run; times are in milliseconds."""

    philosophers: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    meals: int | None = None

    @property
    def counts_meals(self) -> bool:
        return self.meals is not None


def skip_space(text: str) -> str:
    """Return ``text`` without its leading space and control whitespace."""
    return text.lstrip(_WHITESPACE)


def has_invalid_digit(text: str) -> bool:
    """Tell whether ``text`` holds anything other than digits and plus signs.

    Plus signs may appear anywhere, but the text must end with a digit.
    """
    if not text:
        return False
    if any(char != "+" and char not in _DIGITS for char in text):
        return True
    return text[-1] not in _DIGITS


def _accumulate(text: str) -> tuple[int, int]:
    body = text.lstrip("+")
    value = 0
    for char in body:
        value = value * 10 + ord(char) - ord("0")
    return value, len(body)


def parse_number(text: str) -> int:
    """Parse one positive argument, raising ArgumentError if it is unusable."""
    stripped = skip_space(text)
    if not stripped or has_invalid_digit(stripped):
        raise ArgumentError("invalid input")
    value, count = _accumulate(stripped)
    if value <= 0 or value > INT_MAX or count > MAX_DIGITS:
        raise ArgumentError("invalid input")
    return value


def parse_args(args: list[str]) -> Config:
    """Build a Config from the arguments that follow the program name."""
    if len(args) not in (4, 5):
        raise ArgumentError("wrong number of arguments")
    numbers = [parse_number(arg) for arg in args]
    philosophers, time_to_die, time_to_eat, time_to_sleep = numbers[:4]
    meals = numbers[4] if len(numbers) == 5 else None
    return Config(philosophers, time_to_die, time_to_eat, time_to_sleep, meals)