"""Legacy entry script printing the key-provider seed."""

import argparse
import base64

from seedgen.keys import derive_provider_seed

__all__ = ["derive_provider_seed", "main"]


def main(argv: list[str] | None = None) -> int:
    """Print the base64 provider seed for ``--seed`` or the default seed."""

    parser = argparse.ArgumentParser(prog="providerseed")
    parser.add_argument(
        "--seed",
        help="seed string, defaults to SEEDGEN_SEED or the public seed",
    )
    args = parser.parse_args(argv)
    provider_seed = derive_provider_seed(args.seed)
    print(base64.b64encode(provider_seed).decode())
    return 0


if __name__ == "__main__":  # pragma: no cover
    main()
