"""Length of Collatz sequences."""

from __future__ import annotations

import argparse

__all__ = ["collatz_length", "main"]


def collatz_length(n: int) -> int:
    """Return the length of the Collatz sequence beginning at ``n``."""
    length = 1
    while n > 1:
        n = n // 2 if n % 2 == 0 else 3 * n + 1
        length += 1
    return length


def main(argv: list[str] | None = None) -> int:
    """Print the Collatz sequence length of a number (11 by default)."""
    parser = argparse.ArgumentParser(description="Length of a Collatz sequence.")
    parser.add_argument("n", nargs="?", type=int, default=11)
    args = parser.parse_args(argv)
    print(f"Length: {collatz_length(args.n)}")
    return 0