"""
Command-line interface.

    randkey                   demo: two digits drawn from "1" and "2"
    randkey L S N [UNIT]      L letters, S symbols, N digits
"""
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace

from .config import DEFAULT_CONFIG
from .errors import RandKeyError
from .generator import RandKey


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="randkey",
        description="Generate a random key with a given number of letters, symbols and digits.",
    )
    parser.add_argument(
        "counts",
        nargs="*",
        metavar="COUNT",
        help="LETTERS SYMBOLS DIGITS [UNIT], as decimal integers of any size",
    )
    parser.add_argument("--pool", help="replace every pool with these characters")
    parser.add_argument("--add", help="add these characters to the pools")
    parser.add_argument("--remove", help="remove these characters from the pools")
    parser.add_argument("--workers", type=int, default=None, help="worker threads (default: automatic)")
    parser.add_argument("--seed", type=int, default=None, help="fixed seed, for reproducible output")
    parser.add_argument(
        "--quantum",
        action="store_true",
        help="seed from qubits measured on the local Aer simulator",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log generation details to stderr")

    args = parser.parse_args(argv)
    if len(args.counts) not in (0, 3, 4):
        parser.error("expected no counts, or LETTERS SYMBOLS DIGITS [UNIT]")
    return args


def build(args: argparse.Namespace) -> RandKey:
    config = replace(
        DEFAULT_CONFIG,
        max_workers=args.workers,
        seed_source="quantum" if args.quantum else DEFAULT_CONFIG.seed_source,
    )

    if not args.counts:
        rand_key = RandKey("0", "0", "2", config=config)
        rand_key.replace_data(["1", "2"])
    else:
        rand_key = RandKey(*args.counts[:3], config=config)
        if len(args.counts) == 4:
            rand_key.set_unit(args.counts[3])

    if args.pool is not None:
        rand_key.replace_data(args.pool, check=False)
    if args.add:
        rand_key.add_item(args.add)
    if args.remove:
        rand_key.del_item(args.remove)
    return rand_key


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for `python -m randkey` or `run_randkey.py`.
    """
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        rand_key = build(args)
        rand_key.generate(args.seed)
    except RandKeyError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if not args.counts:
        print(rand_key.all_data())
    print(rand_key)
    return 0
