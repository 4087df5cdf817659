"""Constant values used across the seeded byte generator."""

import os

MASK32 = 0xFFFFFFFF
TWO_POW_32 = 4294967296

# xmur3 string hash
HASH_INIT = 1779033703
HASH_MIX = 3432918353
HASH_ROTATE = 13
FINAL_MIX_1 = 2246822507
FINAL_MIX_2 = 3266489909

# sfc32 generator
SFC_SHIFT = 9
SFC_LSHIFT = 3
SFC_ROTATE = 21

PUBLIC_SEED = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"


def _load_default_seed() -> str:
    """Return the default seed string from ``SEEDGEN_SEED``.

    Falls back to :data:`PUBLIC_SEED` when the variable is unset. An empty
    value is a legal seed and is returned as is.

    Returns:
        str: Seed string.
    """

    env = os.getenv("SEEDGEN_SEED")
    if env is None:
        return PUBLIC_SEED
    return env


DEFAULT_SEED = _load_default_seed()

# Ed25519 private keys are built from exactly this many bytes
DEFAULT_LENGTH = 32

# Maximum sizes enforced by the CLI and Lambda handler
MAX_LENGTH = 1 << 20
MAX_HASH_WORDS = 64
