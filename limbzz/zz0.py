"""Signed integers stored as little-endian machine-word limbs.

A value is a sequence of unsigned 64-bit limbs, least significant first,
together with a signed size: its absolute value is the number of limbs in
use and its sign is the sign of the integer. Zero has size 0.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

WORD_BITS = 64
WORD_MASK = (1 << WORD_BITS) - 1


def normalise(limbs: Sequence[int], size: int) -> int:
    """Return ``size`` with high zero limbs dropped, keeping its sign."""
    length = abs(size)
    if length > len(limbs):
        raise ValueError(f"size {size} exceeds the {len(limbs)} limbs given")
    while length and limbs[length - 1] == 0:
        length -= 1
    return -length if size < 0 else length


@dataclass(frozen=True)
class SignedLimbs:
    """An integer held as limbs plus a signed limb count.

    The stored form is canonical: limbs beyond ``abs(size)`` are dropped
    and the most significant stored limb is never zero.
    """

    limbs: tuple = ()
    size: Optional[int] = field(default=None)

    def __post_init__(self) -> None:
        limbs = tuple(self.limbs)
        for limb in limbs:
            if not isinstance(limb, int) or not 0 <= limb <= WORD_MASK:
                raise ValueError(f"limb {limb!r} is not a {WORD_BITS}-bit word")
        size = len(limbs) if self.size is None else self.size
        size = normalise(limbs, size)
        object.__setattr__(self, "limbs", limbs[: abs(size)])
        object.__setattr__(self, "size", size)

    @classmethod
    def from_int(cls, value: int) -> "SignedLimbs":
        """Build the limb form of a Python integer."""
        magnitude = abs(value)
        limbs = []
        while magnitude:
            limbs.append(magnitude & WORD_MASK)
            magnitude >>= WORD_BITS
        size = -len(limbs) if value < 0 else len(limbs)
        return cls(tuple(limbs), size)

    def to_int(self) -> int:
        """Return the Python integer this value represents."""
        magnitude = 0
        for limb in reversed(self.limbs):
            magnitude = (magnitude << WORD_BITS) | limb
        return -magnitude if self.size < 0 else magnitude

    def is_zero(self) -> bool:
        """True if the value is zero."""
        return self.size == 0

    def __int__(self) -> int:
        return self.to_int()


def _ordered(a: SignedLimbs, b: SignedLimbs) -> tuple:
    """Return the magnitudes of a and b, longer first."""
    if len(a.limbs) < len(b.limbs):
        return b.limbs, a.limbs
    return a.limbs, b.limbs


def _mag_add(big: Sequence[int], small: Sequence[int]) -> list:
    """Add magnitudes; the result has one limb more than ``big``."""
    result = []
    carry = 0
    for i, limb in enumerate(big):
        total = limb + (small[i] if i < len(small) else 0) + carry
        result.append(total & WORD_MASK)
        carry = total >> WORD_BITS
    result.append(carry)
    return result


def _mag_sub(big: Sequence[int], small: Sequence[int]) -> tuple:
    """Subtract magnitudes over ``len(big)`` limbs, returning (limbs, borrow)."""
    result = []
    borrow = 0
    for i, limb in enumerate(big):
        diff = limb - (small[i] if i < len(small) else 0) - borrow
        borrow = 1 if diff < 0 else 0
        result.append(diff & WORD_MASK)
    return result, borrow


def _negate(limbs: Sequence[int]) -> list:
    """Two's complement negation over the given number of limbs."""
    result = []
    carry = 1
    for limb in limbs:
        total = (~limb & WORD_MASK) + carry
        result.append(total & WORD_MASK)
        carry = total >> WORD_BITS
    return result


def _mag_mul(big: Sequence[int], small: Sequence[int]) -> list:
    """Schoolbook product of two magnitudes, ``len(big) + len(small)`` limbs."""
    result = [0] * (len(big) + len(small))
    for j, factor in enumerate(small):
        carry = 0
        for i, limb in enumerate(big):
            total = result[i + j] + limb * factor + carry
            result[i + j] = total & WORD_MASK
            carry = total >> WORD_BITS
        result[j + len(big)] = carry
    return result


def _signed_diff(big: Sequence[int], small: Sequence[int]) -> tuple:
    """Return (limbs, size) of ``big - small`` where the size may be negative."""
    limbs, borrow = _mag_sub(big, small)
    size = len(big)
    if borrow:
        limbs = _negate(limbs)
        size = -size
    return limbs, size


def add(a: SignedLimbs, b: SignedLimbs) -> SignedLimbs:
    """Return a + b."""
    m, n = a.size, b.size
    big_sign = m if abs(m) >= abs(n) else n
    big, small = _ordered(a, b)

    if (m ^ n) < 0:
        limbs, size = _signed_diff(big, small)
    else:
        limbs = _mag_add(big, small)
        size = len(big) + 1

    if big_sign < 0:
        size = -size
    return SignedLimbs(tuple(limbs), normalise(limbs, size))


def sub(a: SignedLimbs, b: SignedLimbs) -> SignedLimbs:
    """Return a - b."""
    m, n = a.size, b.size
    sign = abs(m) - abs(n)
    big, small = _ordered(a, b)

    if (m ^ n) >= 0:
        limbs, size = _signed_diff(big, small)
        if (sign ^ m) < 0:
            size = -size
    else:
        limbs = _mag_add(big, small)
        size = len(big) + 1
        if m < 0:
            size = -size
    return SignedLimbs(tuple(limbs), normalise(limbs, size))


def mul(a: SignedLimbs, b: SignedLimbs) -> SignedLimbs:
    """Return a * b."""
    if a.is_zero() or b.is_zero():
        return SignedLimbs()
    big, small = _ordered(a, b)
    limbs = _mag_mul(big, small)
    size = len(limbs) - (1 if limbs[-1] == 0 else 0)
    if (a.size ^ b.size) < 0:
        size = -size
    return SignedLimbs(tuple(limbs), size)