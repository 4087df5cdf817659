"""Hand derived seed bytes to a signing-key constructor."""

import logging
from dataclasses import dataclass
from typing import Any, Protocol

from .constants import DEFAULT_LENGTH, DEFAULT_SEED, PUBLIC_SEED
from .core import random_bytes

logger = logging.getLogger(__name__)


class KeyConstructor(Protocol):
    def build(self, seed: bytes) -> Any:
        """Return a key object built from ``seed``."""


@dataclass
class Ed25519Constructor:
    """Build PyNaCl Ed25519 signing keys from 32-byte seeds."""

    seed_length: int = DEFAULT_LENGTH

    def build(self, seed: bytes) -> Any:
        """Return ``nacl.signing.SigningKey`` for ``seed``.

        Args:
            seed: Exactly ``seed_length`` bytes of key material.

        Returns:
            nacl.signing.SigningKey: Signing key.

        Raises:
            ValueError: If ``seed`` has the wrong length.
            RuntimeError: If PyNaCl is not installed.
        """

        if len(seed) != self.seed_length:
            raise ValueError(
                f"Ed25519 seed must be {self.seed_length} bytes, got {len(seed)}"
            )
        try:
            from nacl.signing import SigningKey
        except ImportError as exc:  # pragma: no cover - enforce dependency
            raise RuntimeError(
                "PyNaCl must be installed; run 'pip install pynacl'"
            ) from exc
        return SigningKey(bytes(seed))


def derive_provider_seed(
    seed: str | None = None, length: int = DEFAULT_LENGTH
) -> bytes:
    """Return key-provider seed bytes for ``seed``.

    Args:
        seed: Seed string; the configured default when ``None``.
        length: Number of bytes to derive.

    Returns:
        bytes: Derived seed bytes.
    """

    if seed is None:
        seed = DEFAULT_SEED
    if seed == PUBLIC_SEED:
        logger.warning("deriving key material from the public default seed")
    return random_bytes(length, seed)


def bootstrap(
    seed: str | None = None, constructor: KeyConstructor | None = None
) -> Any:
    """Derive the provider seed and build a key from it.

    Args:
        seed: Seed string; the configured default when ``None``.
        constructor: Key constructor; Ed25519 when ``None``.

    Returns:
        Any: Whatever ``constructor.build`` returns.
    """

    if constructor is None:
        constructor = Ed25519Constructor()
    provider_seed = derive_provider_seed(seed)
    key = constructor.build(provider_seed)
    logger.debug("built %s key", type(key).__name__)
    return key


def public_key_hex(seed: str | None = None) -> str:
    key = bootstrap(seed, Ed25519Constructor())
    return key.verify_key.encode().hex()
