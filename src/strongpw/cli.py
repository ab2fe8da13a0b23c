"""Command-line entry point with subparser-based CLI."""

import argparse
import json
import sys
from pathlib import Path
from typing import Dict, List, Optional, TextIO

from strongpw.config import CheckerConfig
from strongpw.evaluator import PasswordEvaluator
from strongpw.experiments import probe_costs
from strongpw.index import DictionaryIndex
from strongpw.metrics.probes import home_occupancy, table_summary
from strongpw.utils import get_logger
from strongpw.wordlist import load_wordlist

PREDEFINED_PASSWORDS = (
    "account8",
    "accountability",
    "9a$D#qW7!uX&Lv3zT",
    "B@k45*W!c$Y7#zR9P",
    "X$8vQ!mW#3Dz&Yr4K5",
)

COST_LABELS = {
    "chaining_sparse": "Separate Chaining with sparse hash",
    "chaining_dense": "Separate Chaining with dense hash",
    "probing_sparse": "Linear Probing with sparse hash",
    "probing_dense": "Linear Probing with dense hash",
}


def add_common_args(parser: argparse.ArgumentParser) -> None:
    """Add common arguments to parser.

    Args:
        parser: Argument parser to add common args to
    """
    parser.add_argument(
        "--wordlist", type=Path, required=True,
        help="Word list file, one word per line"
    )
    parser.add_argument(
        "--config", type=Path, default=None,
        help="YAML config with table sizes and policy"
    )


def build_evaluator(args: argparse.Namespace, words: Optional[Dict[str, int]] = None) -> PasswordEvaluator:
    """Load config and word list, and build the index and evaluator."""
    config = CheckerConfig.from_yaml(args.config) if args.config else CheckerConfig()
    logger = get_logger("cli", level=config.log_level)
    if words is None:
        words = load_wordlist(args.wordlist)
    logger.info(f"Loaded {len(words)} words from {args.wordlist}")
    index = DictionaryIndex(
        words,
        chain_buckets=config.chain_buckets,
        probe_capacity=config.probe_capacity,
        logger=logger,
    )
    return PasswordEvaluator(index, min_length=config.min_length)


def report(password: str, evaluator: PasswordEvaluator, out: TextIO) -> bool:
    """Check one password and print its verdict and search costs."""
    verdict = evaluator.evaluate(password)
    print(f"\nChecking password: {password}", file=out)
    print(f"Password: {password} | Is strong: {verdict.strong} ({verdict.rule.value})", file=out)
    print("Search costs:", file=out)
    for name, cost in evaluator.costs.items():
        print(f"  {COST_LABELS[name]}: {cost}", file=out)
    return verdict.strong


def cmd_check(
    args: argparse.Namespace,
    stdin: Optional[TextIO] = None,
    out: Optional[TextIO] = None,
) -> int:
    """Check the given passwords, or run the predefined set and an interactive loop."""
    stdin = stdin or sys.stdin
    out = out or sys.stdout
    evaluator = build_evaluator(args)

    if args.passwords:
        for password in args.passwords:
            report(password, evaluator, out)
        return 0

    print("=== Predefined Password Tests ===", file=out)
    for password in PREDEFINED_PASSWORDS:
        report(password, evaluator, out)

    while True:
        print("Enter a password to check (type 'exit' to quit): ", end="", file=out, flush=True)
        line = stdin.readline()
        if not line:
            break
        password = line.rstrip("\r\n")
        if password.lower() == "exit":
            print("Exiting program.", file=out)
            break
        report(password, evaluator, out)
    return 0


def cmd_stats(args: argparse.Namespace, out: Optional[TextIO] = None) -> int:
    """Print home-slot occupancy and table packing diagnostics as JSON."""
    out = out or sys.stdout
    words = load_wordlist(args.wordlist)
    index = build_evaluator(args, words).index

    json.dump(
        {"tables": table_summary(index), "home_occupancy": home_occupancy(index, words)},
        out,
        indent=2,
    )
    print(file=out)
    return 0


def cmd_bench(args: argparse.Namespace, out: Optional[TextIO] = None) -> int:
    """Run the probe-cost experiment."""
    out = out or sys.stdout
    config = CheckerConfig.from_yaml(args.config) if args.config else CheckerConfig()
    result = probe_costs.run_experiment(
        load_wordlist(args.wordlist),
        args.out_dir,
        config=config,
        num_misses=args.num_misses,
        seed=args.seed,
    )
    print(f"Metrics: {result['metrics_path']}", file=out)
    print(f"Figure: {result['figure_path']}", file=out)
    return 0


def make_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="strongpw",
        description="Check password strength against a dictionary and compare hash table probe costs",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser("check", help="Check passwords")
    add_common_args(check)
    check.add_argument(
        "passwords", nargs="*",
        help="Passwords to check (interactive when omitted)"
    )
    check.set_defaults(func=cmd_check)

    stats = subparsers.add_parser("stats", help="Print table diagnostics as JSON")
    add_common_args(stats)
    stats.set_defaults(func=cmd_stats)

    bench = subparsers.add_parser("bench", help="Run the probe-cost experiment")
    add_common_args(bench)
    bench.add_argument(
        "--out_dir", type=Path, default=Path("artifacts"),
        help="Output directory for metrics and figures"
    )
    probe_costs.add_args(bench)
    bench.set_defaults(func=cmd_bench)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entrypoint."""
    args = make_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
