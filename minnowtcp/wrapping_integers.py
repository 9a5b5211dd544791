"""32-bit wrapping sequence numbers relative to an arbitrary zero point."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Wrap32"]

_MASK32 = 0xFFFFFFFF
_HIGH_MASK = 0xFFFFFFFF00000000
_SPAN = 1 << 32
_HALF_SPAN = _SPAN // 2


@dataclass(frozen=True)
class Wrap32:
    """A 32-bit unsigned value that wraps back to zero after 2**32 - 1."""

    raw_value: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "raw_value", self.raw_value & _MASK32)

    @classmethod
    def wrap(cls, n: int, zero_point: Wrap32) -> Wrap32:
        """Wrap the absolute sequence number ``n`` relative to ``zero_point``."""
        return zero_point + (n & _MASK32)

    def unwrap(self, zero_point: Wrap32, checkpoint: int) -> int:
        """Return the absolute sequence number closest to ``checkpoint`` that wraps to this value."""
        offset = (self.raw_value - zero_point.raw_value) & _MASK32
        checkpoint_low = checkpoint & _MASK32
        candidate = (checkpoint & _HIGH_MASK) | offset

        if candidate >= _SPAN and offset > checkpoint_low and offset - checkpoint_low > _HALF_SPAN:
            return candidate - _SPAN
        if (
            candidate < _HIGH_MASK
            and checkpoint_low > offset
            and checkpoint_low - offset > _HALF_SPAN
        ):
            return candidate + _SPAN
        return candidate

    def __add__(self, n: int) -> Wrap32:
        return Wrap32((self.raw_value + n) & _MASK32)