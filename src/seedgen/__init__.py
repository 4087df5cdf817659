"""Deterministic seed-to-bytes derivation package."""

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
import re

from .core import Sfc32, Xmur3, random_bytes, random_int
from .errors import InvalidArgumentError
from .handler import DeriveEvent, lambda_handler
from .keys import (
    Ed25519Constructor,
    bootstrap,
    derive_provider_seed,
    public_key_hex,
)
from .cli import main as cli

_pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"


def _read_version(path: Path) -> str:
    text = path.read_text(encoding="utf-8")
    match = re.search(r'^version\s*=\s*"([^"]+)"', text, flags=re.MULTILINE)
    if not match:
        raise RuntimeError("version not found in pyproject.toml")
    return match.group(1)


try:
    __version__ = version("seedgen")
except PackageNotFoundError:
    __version__ = _read_version(_pyproject)

__all__ = [
    "lambda_handler",
    "cli",
    "DeriveEvent",
    "Xmur3",
    "Sfc32",
    "random_int",
    "random_bytes",
    "InvalidArgumentError",
    "Ed25519Constructor",
    "bootstrap",
    "derive_provider_seed",
    "public_key_hex",
    "__version__",
]
