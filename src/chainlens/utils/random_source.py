# src/chainlens/utils/random_source.py
import random
from datetime import datetime, timezone
from typing import Optional, Sequence, TypeVar

T = TypeVar('T')

HEX_DIGITS = '0123456789abcdef'


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class RandomSource:
    """Single source of randomness for all mock data.

    Every helper is built on ``random()`` so a subclass overriding that one
    method controls every generated value. Overrides must stay in [0, 1).
    """

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def random(self) -> float:
        """Uniform draw in [0, 1)"""
        return self._rng.random()

    def below(self, n: int) -> int:
        """floor(random() * n)"""
        return int(self.random() * n)

    def span(self, low: int, width: int) -> int:
        """Integer in [low, low + width)"""
        return self.below(width) + low

    def uniform(self, low: float, width: float) -> float:
        return low + self.random() * width

    def choice(self, items: Sequence[T]) -> T:
        return items[self.below(len(items))]

    def hex_string(self, length: int) -> str:
        return ''.join(HEX_DIGITS[self.below(16)] for _ in range(length))

    def hex_value(self, length: int) -> str:
        """0x-prefixed hex string with ``length`` digits"""
        return '0x' + self.hex_string(length)
