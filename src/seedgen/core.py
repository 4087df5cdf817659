"""Deterministic byte derivation from a seed string.

This module expands a short human-readable seed into a fixed-length byte
buffer. The seed is scrambled by the ``xmur3`` string hash into four 32-bit
words which seed an ``sfc32`` generator; each output byte consumes one
generator step. The arithmetic mirrors 32-bit wraparound exactly so that
previously derived keys can be reproduced.

The output is NOT cryptographically secure. It is meant for test and
bootstrap key material only.
"""

import logging
import math
import struct
from typing import Callable

from .constants import (
    FINAL_MIX_1,
    FINAL_MIX_2,
    HASH_INIT,
    HASH_MIX,
    HASH_ROTATE,
    MASK32,
    SFC_LSHIFT,
    SFC_ROTATE,
    SFC_SHIFT,
    TWO_POW_32,
)
from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)


def imul(a: int, b: int) -> int:
    """Return ``a * b`` truncated to an unsigned 32-bit word."""

    return (a * b) & MASK32


def rotl32(x: int, n: int) -> int:
    """Rotate the 32-bit word ``x`` left by ``n`` bits."""

    x &= MASK32
    return ((x << n) | (x >> (32 - n))) & MASK32


def code_units(seed: str) -> tuple[int, ...]:
    """Return ``seed`` as a tuple of UTF-16 code units.

    Characters outside the Basic Multilingual Plane become surrogate pairs,
    and lone surrogates are passed through unchanged.

    Args:
        seed: Seed string.

    Returns:
        tuple[int, ...]: Code units in string order.
    """

    data = seed.encode("utf-16-le", "surrogatepass")
    return struct.unpack(f"<{len(data) // 2}H", data)


class Xmur3:
    """Stateful string hash producing a stream of 32-bit words."""

    def __init__(self, seed: str):
        """Absorb ``seed`` into the hash accumulator.

        Args:
            seed: Seed string, possibly empty.

        Raises:
            TypeError: If ``seed`` is not a string.
        """

        if not isinstance(seed, str):
            raise TypeError("seed must be a string")
        units = code_units(seed)
        h = HASH_INIT ^ len(units)
        for unit in units:
            h = imul(h ^ unit, HASH_MIX)
            h = rotl32(h, HASH_ROTATE)
        self.h = h

    def next(self) -> int:
        """Scramble the accumulator and return it as an unsigned word."""

        h = self.h
        h = imul(h ^ (h >> 16), FINAL_MIX_1)
        h = imul(h ^ (h >> 13), FINAL_MIX_2)
        h ^= h >> 16
        self.h = h
        return h

    __call__ = next


class Sfc32:
    """Small fast chaotic generator with 128 bits of state."""

    def __init__(self, a: int, b: int, c: int, d: int):
        self.a = a & MASK32
        self.b = b & MASK32
        self.c = c & MASK32
        self.d = d & MASK32

    @property
    def state(self) -> tuple[int, int, int, int]:
        return self.a, self.b, self.c, self.d

    def next_uint32(self) -> int:
        """Advance the state once and return the raw output word.

        Returns:
            int: Unsigned 32-bit output.
        """

        a, b, c, d = self.a, self.b, self.c, self.d
        t = (a + b) & MASK32
        a = b ^ (b >> SFC_SHIFT)
        b = (c + (c << SFC_LSHIFT)) & MASK32
        c = rotl32(c, SFC_ROTATE)
        d = (d + 1) & MASK32
        t = (t + d) & MASK32
        c = (c + t) & MASK32
        self.a, self.b, self.c, self.d = a, b, c, d
        return t

    def random(self) -> float:
        """Return the next output as a float in ``[0, 1)``."""

        return self.next_uint32() / TWO_POW_32

    __call__ = random


def random_int(draw: Callable[[], float], low: int, high: int) -> int:
    """Map one draw from ``draw`` into ``[low, high)``.

    ``high`` must be greater than ``low``; the range is not validated and a
    degenerate range yields a degenerate result.

    Args:
        draw: Zero-argument callable returning a float in ``[0, 1)``.
        low: Inclusive lower bound.
        high: Exclusive upper bound.

    Returns:
        int: Drawn integer.
    """

    return math.floor(draw() * (high - low) + low)


def random_bytes(length: int, seed: str) -> bytes:
    """Return ``length`` pseudo-random bytes derived from ``seed``.

    The result depends only on ``length`` and ``seed``; no system entropy is
    consulted.

    Args:
        length: Number of bytes to produce.
        seed: Seed string, possibly empty.

    Returns:
        bytes: Derived bytes.

    Raises:
        InvalidArgumentError: If ``length`` is negative.
        TypeError: If ``length`` is not an integer or ``seed`` not a string.
    """

    if isinstance(length, bool) or not isinstance(length, int):
        raise TypeError("length must be an integer")
    if length < 0:
        raise InvalidArgumentError(f"length must be non-negative, got {length}")
    hash_ = Xmur3(seed)
    prng = Sfc32(hash_(), hash_(), hash_(), hash_())
    out = bytearray(length)
    for i in range(length):
        out[i] = random_int(prng, 0, 256)
    logger.debug("derived %d bytes from %d-character seed", length, len(seed))
    return bytes(out)
