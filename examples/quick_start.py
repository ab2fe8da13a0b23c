"""Quick start guide for strongpw.

Demonstrates:
1. Building an index and checking passwords
2. Reading the per-table search costs of the last lookup
3. Comparing how the two hash functions spread a word list
"""

from strongpw import (
    DictionaryIndex,
    PasswordEvaluator,
    dense_hash,
    home_indices,
    occupancy_summary,
    sparse_hash,
)


def example_1_check_passwords(evaluator: PasswordEvaluator):
    """Example 1: Strength verdicts and the rule that decided them."""
    print("=" * 60)
    print("Example 1: Checking Passwords")
    print("=" * 60)

    for password in ["account8", "accountability", "9a$D#qW7!uX&Lv3zT", "pw", "dragon1"]:
        verdict = evaluator.evaluate(password)
        print(f"  {password:<20} strong={verdict.strong!s:<5} rule={verdict.rule.value}")
    print()


def example_2_search_costs(evaluator: PasswordEvaluator):
    """Example 2: Probe counts of the most recent lookup."""
    print("=" * 60)
    print("Example 2: Search Costs")
    print("=" * 60)

    evaluator.is_strong("password")
    for name, cost in evaluator.costs.items():
        print(f"  {name:<16} {cost}")
    print()


def example_3_hash_spread():
    """Example 3: Sparse vs dense hash on words that differ at odd positions."""
    print("=" * 60)
    print("Example 3: Hash Function Spread")
    print("=" * 60)

    words = [f"a{c}b{c}c{c}d{c}e{c}f{c}g{c}h{c}" for c in "0123456789"]
    for name, fn in [("sparse", sparse_hash), ("dense", dense_hash)]:
        summary = occupancy_summary(home_indices(words, fn, 1000), 1000)
        print(
            f"  {name:<6} slots used={summary['unique_slots_touched']:<3} "
            f"max load={summary['max_load']:<3} collision rate={summary['collision_rate']:.2f}"
        )
    print()


def main():
    """Run all examples."""
    index = DictionaryIndex({"account": 1, "password": 2, "dragon": 3})
    evaluator = PasswordEvaluator(index)

    example_1_check_passwords(evaluator)
    example_2_search_costs(evaluator)
    example_3_hash_spread()


if __name__ == "__main__":
    main()
