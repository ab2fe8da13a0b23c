"""Tests for the password strength policy."""

import pytest

from strongpw import DictionaryIndex, LookupResult, PasswordEvaluator, Rule


@pytest.mark.parametrize(
    "password, strong",
    [
        ("account8", False),
        ("accountability", True),
        ("9a$D#qW7!uX&Lv3zT", True),
        ("pw", False),
        ("dragon1", False),
    ],
)
def test_end_to_end_scenarios(evaluator, password, strong):
    assert evaluator.is_strong(password) is strong


@pytest.mark.parametrize("password", ["", "a", "passwor", "1234567"])
def test_short_passwords_issue_no_queries(small_dictionary, password):
    """Short passwords are rejected before any lookup."""
    calls = []

    class RecordingIndex(DictionaryIndex):
        def query(self, word):
            calls.append(word)
            return super().query(word)

    evaluator = PasswordEvaluator(RecordingIndex(small_dictionary))
    verdict = evaluator.evaluate(password)

    assert not verdict.strong
    assert verdict.rule is Rule.TOO_SHORT
    assert verdict.lookups == ()
    assert calls == []
    assert all(cost == 0 for cost in evaluator.costs.values())


def test_short_password_resets_previous_costs(evaluator):
    evaluator.is_strong("password")
    assert any(cost > 0 for cost in evaluator.costs.values())

    evaluator.is_strong("pw")
    assert evaluator.last_result == LookupResult()


def test_dictionary_word_rule(evaluator):
    verdict = evaluator.evaluate("password")
    assert verdict.rule is Rule.DICTIONARY_WORD
    assert len(verdict.lookups) == 1


def test_word_plus_digit_issues_two_queries(evaluator):
    verdict = evaluator.evaluate("account8")
    assert verdict.rule is Rule.WORD_PLUS_DIGIT
    assert len(verdict.lookups) == 2
    assert not verdict.lookups[0].found
    assert verdict.lookups[1].found
    # Costs reflect the most recent (second) query
    assert evaluator.last_result is verdict.lookups[1]


def test_trailing_digit_without_dictionary_base(evaluator):
    verdict = evaluator.evaluate("zebrafish9")
    assert verdict.strong
    assert verdict.rule is Rule.STRONG
    assert len(verdict.lookups) == 2


def test_only_one_trailing_digit_is_stripped(evaluator):
    """'dragon12' strips to 'dragon1', which is not a word."""
    assert evaluator.is_strong("dragon12")


def test_no_trailing_digit_issues_one_query(evaluator):
    verdict = evaluator.evaluate("accountability")
    assert len(verdict.lookups) == 1


def test_custom_min_length(small_index):
    evaluator = PasswordEvaluator(small_index, min_length=12)
    verdict = evaluator.evaluate("zebrafish9")
    assert verdict.rule is Rule.TOO_SHORT


def test_invalid_min_length(small_index):
    with pytest.raises(ValueError):
        PasswordEvaluator(small_index, min_length=0)


def test_non_ascii_trailing_digit_is_stripped():
    evaluator = PasswordEvaluator(DictionaryIndex({"dragonfly": 1}))
    verdict = evaluator.evaluate("dragonfly٣")
    assert verdict.rule is Rule.WORD_PLUS_DIGIT
    assert not verdict.strong


def test_single_digit_password_issues_one_query(small_index):
    evaluator = PasswordEvaluator(small_index, min_length=1)
    verdict = evaluator.evaluate("5")
    assert verdict.rule is Rule.STRONG
    assert len(verdict.lookups) == 1
