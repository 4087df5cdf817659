"""AWS Lambda entry point for seed derivation."""

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from .constants import DEFAULT_LENGTH, MAX_LENGTH
from .core import random_bytes
from .keys import Ed25519Constructor

logger = logging.getLogger(__name__)


@dataclass
class DeriveEvent:
    """Invocation payload for :func:`lambda_handler`."""

    seed: str
    length: int = DEFAULT_LENGTH
    public_key: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DeriveEvent":
        """Return ``DeriveEvent`` built from ``data``.

        Args:
            data: Mapping with key ``"seed"`` and optional ``"length"`` and
                ``"public_key"``.

        Returns:
            DeriveEvent: Parsed event object.

        Raises:
            KeyError: If ``seed`` is missing.
            TypeError: If ``data`` is not a mapping or values have the wrong
                type.
        """
        if not isinstance(data, Mapping):
            raise TypeError("event must be a mapping")
        try:
            seed = data["seed"]
        except KeyError as exc:
            raise KeyError(f"missing field: {exc.args[0]}") from exc
        if not isinstance(seed, str):
            raise TypeError("seed must be a string")
        length = data.get("length", DEFAULT_LENGTH)
        if isinstance(length, bool) or not isinstance(length, int):
            raise TypeError("length must be an integer")
        public_key = data.get("public_key", False)
        if not isinstance(public_key, bool):
            raise TypeError("public_key must be a boolean")
        return cls(seed=seed, length=length, public_key=public_key)


def lambda_handler(event: Mapping[str, Any] | DeriveEvent, _ctx) -> dict:
    """Handle a seed derivation request.

    Args:
        event: Invocation payload or parsed :class:`DeriveEvent`.
        _ctx: Lambda context object (unused).

    Returns:
        dict: Hex bytes under ``"bytes"`` and, when requested, the Ed25519
        verify key under ``"public_key"``.

    Raises:
        KeyError: If ``event`` is missing ``seed``.
        TypeError: If ``event`` is not a valid mapping.
        ValueError: If ``length`` exceeds :data:`MAX_LENGTH`.
        InvalidArgumentError: If ``length`` is negative.
    """
    evt = event if isinstance(event, DeriveEvent) else DeriveEvent.from_dict(event)
    if evt.length > MAX_LENGTH:
        raise ValueError(f"length may not exceed {MAX_LENGTH} bytes")

    derived = random_bytes(evt.length, evt.seed)
    response = {"bytes": derived.hex()}
    if evt.public_key:
        key = Ed25519Constructor().build(derived)
        response["public_key"] = key.verify_key.encode().hex()
    logger.debug("handled derivation of %d bytes", evt.length)
    return response
