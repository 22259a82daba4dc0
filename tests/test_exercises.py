import io

import pytest

from dsdrills.exercises import (
    distinct_descending,
    is_balanced,
    is_palindrome,
    main,
    reverse_words,
    round_robin,
    sort_with_stacks,
)
from dsdrills.stack import StackUnderflowError


@pytest.mark.parametrize(
    "values",
    [[], [5], [3, 1, 2], [9, -4, 7, 7, 0, 12, -4], list(range(10, 0, -1))],
)
def test_sort_with_stacks_matches_sorted(values):
    assert sort_with_stacks(values) == sorted(values)


def test_sort_with_stacks_accepts_iterables():
    assert sort_with_stacks(iter([4, 2, 8])) == [2, 4, 8]


@pytest.mark.parametrize(
    "values", [[], [1], [2, 2, 2], [5, 1, 5, 3, 1, 9], [-1, 0, -1, 4]]
)
def test_distinct_descending_matches_set(values):
    assert distinct_descending(values) == sorted(set(values), reverse=True)


def test_reverse_words_single_word():
    assert reverse_words("abc") == "cba"


def test_reverse_words_stops_at_newline():
    assert reverse_words("abc\nxyz") == "cba"


def test_reverse_words_with_space():
    assert reverse_words("ab cd") == " badc "


def test_reverse_words_keeps_letters():
    text = "hello big world"
    result = reverse_words(text)
    assert sorted(result.replace(" ", "")) == sorted(text.replace(" ", ""))


@pytest.mark.parametrize("text", ["", "abc", "([]{})", "{[()()]}\n", "(a + b) * [c]"])
def test_balanced_expressions(text):
    assert is_balanced(text) is True


@pytest.mark.parametrize("text", ["(", "(()", "(]", "{[}"])
def test_unbalanced_expressions(text):
    assert is_balanced(text) is False


def test_closer_without_opener_raises():
    with pytest.raises(StackUnderflowError):
        is_balanced(")")


def test_balance_ignores_text_after_newline():
    assert is_balanced("()\n(") is True


@pytest.mark.parametrize(
    "text", ["", "Ana", "A man, a plan, a canal: Panama", "Socorram-me, subi no onibus em Marrocos"]
)
def test_palindromes(text):
    assert is_palindrome(text) is True


@pytest.mark.parametrize("text", ["hello", "ab", "Abca"])
def test_not_palindromes(text):
    assert is_palindrome(text) is False


def test_round_robin_source_example():
    assert round_robin([(1, 7), (2, 5), (3, 9), (4, 6)], 3) == [2, 4, 1, 3]


def test_round_robin_finishes_every_job_once():
    jobs = [(1, 10), (2, 1), (3, 4), (4, 3), (5, 8)]
    assert sorted(round_robin(jobs, 2)) == [1, 2, 3, 4, 5]


def test_round_robin_short_jobs_keep_order():
    assert round_robin([(3, 1), (1, 2), (2, 3)], 3) == [3, 1, 2]


def test_round_robin_rejects_non_positive_timeslice():
    with pytest.raises(ValueError):
        round_robin([(1, 2)], 0)


def test_main_sort(capsys):
    assert main(["sort", "3", "1", "2"]) == 0
    assert "1 2 3" in capsys.readouterr().out


def test_main_distinct(capsys):
    assert main(["distinct", "2", "5", "2"]) == 0
    assert capsys.readouterr().out.strip() == "5 2"


def test_main_balance(capsys):
    assert main(["balance", "(]"]) == 0
    assert capsys.readouterr().out.strip() == "Expressao nao balanceada."


def test_main_balance_underflow(capsys):
    assert main(["balance", ")"]) == 1
    assert "error" in capsys.readouterr().err


def test_main_palindrome_from_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("Ana\n"))
    assert main(["palindrome"]) == 0
    assert capsys.readouterr().out.strip() == "Frase eh palindroma"


def test_main_schedule_default(capsys):
    assert main(["schedule"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [f"Processo {pid} concluido" for pid in (2, 4, 1, 3)]


def test_main_reverse(capsys):
    assert main(["reverse", "xyz"]) == 0
    assert capsys.readouterr().out.strip() == "zyx"