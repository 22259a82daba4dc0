"""Exercises solved with the bounded stack and queue, plus a command line."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, TypeVar

from dsdrills.circular_queue import CircularQueue
from dsdrills.stack import Stack, StackUnderflowError

T = TypeVar("T")

OPENERS = "([{"
CLOSER_FOR = {")": "(", "]": "[", "}": "{"}
DEFAULT_TIMESLICE = 3
DEFAULT_JOBS: Tuple[Tuple[int, int], ...] = ((1, 7), (2, 5), (3, 9), (4, 6))


def _drain(stack: Stack[T]) -> Iterator[T]:
    """Pop every item off ``stack``, top first."""
    while not stack.is_empty():
        yield stack.pop()


def _first_line(text: str) -> str:
    return text.split("\n", 1)[0]


def _insertion_stack(values: Sequence[int]) -> Stack[int]:
    """Stack the values so that the largest one ends up on top.

    Each new value is slid into place by moving the larger items onto an
    auxiliary stack and back again.
    """
    ordered: Stack[int] = Stack(len(values))
    spare: Stack[int] = Stack(len(values))
    for value in values:
        while not ordered.is_empty() and ordered.peek() > value:
            spare.push(ordered.pop())
        ordered.push(value)
        for item in _drain(spare):
            ordered.push(item)
    return ordered


def sort_with_stacks(values: Iterable[int]) -> List[int]:
    """Return the values in increasing order, sorted with two stacks."""
    values = list(values)
    ordered = _insertion_stack(values)
    reversed_stack: Stack[int] = Stack(len(values))
    for item in _drain(ordered):
        reversed_stack.push(item)
    return list(_drain(reversed_stack))


def distinct_descending(values: Iterable[int]) -> List[int]:
    """Return the distinct values in decreasing order, sorted with stacks."""
    ordered = _insertion_stack(list(values))
    result: List[int] = []
    while not ordered.is_empty():
        item = ordered.pop()
        if not ordered.is_empty() and item == ordered.peek():
            continue
        result.append(item)
    return result


def reverse_words(text: str) -> str:
    """Reverse each word of the first line of ``text`` in place with a stack.

    A space flushes the stack together with a leading space and then starts
    the next word with a space, so separators come out doubled around words.
    """
    line = _first_line(text)
    stack: Stack[str] = Stack(len(line) + 1)
    pieces: List[str] = []
    for char in line:
        if char != " ":
            stack.push(char)
        else:
            stack.push(" ")
            pieces.extend(_drain(stack))
            stack.push(" ")
    pieces.extend(_drain(stack))
    return "".join(pieces)


def is_balanced(text: str) -> bool:
    """Tell whether the brackets on the first line of ``text`` are balanced.

    A closing bracket only cancels a matching opener on top of the stack;
    any other closer is ignored. A closer met while no opener is pending
    raises :class:`StackUnderflowError`.
    """
    stack: Stack[str] = Stack(max(len(text), 1))
    for char in _first_line(text):
        if char in OPENERS:
            stack.push(char)
        elif char in CLOSER_FOR and stack.peek() == CLOSER_FOR[char]:
            stack.pop()
    return stack.is_empty()


def is_palindrome(text: str) -> bool:
    """Tell whether the ASCII letters of ``text`` read the same both ways."""
    letters = [char.upper() for char in text if char.isascii() and char.isalpha()]
    queue: CircularQueue[str] = CircularQueue(len(letters))
    stack: Stack[str] = Stack(len(letters))
    for letter in letters:
        queue.enqueue(letter)
        stack.push(letter)
    while not queue.is_empty() and queue.dequeue() == stack.pop():
        pass
    return queue.is_empty()


def round_robin(
    jobs: Iterable[Tuple[int, int]], timeslice: int = DEFAULT_TIMESLICE
) -> List[int]:
    """Run (process id, time needed) jobs round robin; return ids in finishing order."""
    if timeslice <= 0:
        raise ValueError("timeslice must be positive")
    jobs = list(jobs)
    queue: CircularQueue[Tuple[int, int]] = CircularQueue(len(jobs))
    for job in jobs:
        queue.enqueue(job)
    finished: List[int] = []
    while not queue.is_empty():
        pid, remaining = queue.dequeue()
        if remaining > timeslice:
            queue.enqueue((pid, remaining - timeslice))
        else:
            finished.append(pid)
    return finished


def _parse_job(spec: str) -> Tuple[int, int]:
    pid, sep, remaining = spec.partition(":")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected PID:TIME, got {spec!r}")
    try:
        return int(pid), int(remaining)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected PID:TIME, got {spec!r}") from exc


def _text_or_stdin(text: Optional[str]) -> str:
    return text if text is not None else sys.stdin.readline()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dsdrills", description="Stack and queue exercises."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    sort_cmd = commands.add_parser("sort", help="sort integers with two stacks")
    sort_cmd.add_argument("values", nargs="*", type=int)

    distinct_cmd = commands.add_parser(
        "distinct", help="distinct integers in decreasing order"
    )
    distinct_cmd.add_argument("values", nargs="*", type=int)

    reverse_cmd = commands.add_parser("reverse", help="reverse each word")
    reverse_cmd.add_argument("text", nargs="?")

    balance_cmd = commands.add_parser("balance", help="check bracket balance")
    balance_cmd.add_argument("text", nargs="?")

    palindrome_cmd = commands.add_parser("palindrome", help="check a palindrome")
    palindrome_cmd.add_argument("text", nargs="?")

    schedule_cmd = commands.add_parser("schedule", help="round-robin scheduling")
    schedule_cmd.add_argument("jobs", nargs="*", type=_parse_job, metavar="PID:TIME")
    schedule_cmd.add_argument("--timeslice", type=int, default=DEFAULT_TIMESLICE)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one exercise from the command line; return the exit status."""
    args = _build_parser().parse_args(argv)

    if args.command == "sort":
        ordered = sort_with_stacks(args.values)
        print("Elementos ordenados em forma crescente:", " ".join(map(str, ordered)))
    elif args.command == "distinct":
        print(" ".join(map(str, distinct_descending(args.values))))
    elif args.command == "reverse":
        print(reverse_words(_text_or_stdin(args.text)))
    elif args.command == "balance":
        try:
            balanced = is_balanced(_text_or_stdin(args.text))
        except StackUnderflowError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1
        print("Expressao Balanceada." if balanced else "Expressao nao balanceada.")
    elif args.command == "palindrome":
        if is_palindrome(_text_or_stdin(args.text)):
            print("Frase eh palindroma")
        else:
            print("Frase nao eh palindroma")
    elif args.command == "schedule":
        jobs = args.jobs or list(DEFAULT_JOBS)
        try:
            finished = round_robin(jobs, args.timeslice)
        except ValueError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1
        for pid in finished:
            print(f"Processo {pid} concluido")
    return 0


if __name__ == "__main__":
    sys.exit(main())