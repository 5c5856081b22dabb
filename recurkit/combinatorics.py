"""Backtracking enumerators for subsets, partitions, combinations and permutations."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


def _is_palindrome(text: str) -> bool:
    return text == text[::-1]


def palindrome_partitions(s: str) -> list[list[str]]:
    """Return every way to split ``s`` into palindromic pieces."""

    def walk(start: int) -> Iterator[tuple[str, ...]]:
        if start == len(s):
            yield ()
            return
        for end in range(start + 1, len(s) + 1):
            piece = s[start:end]
            if _is_palindrome(piece):
                for rest in walk(end):
                    yield (piece, *rest)

    return [list(parts) for parts in walk(0)]


def combination_sum3(k: int, n: int) -> list[list[int]]:
    """Return all sets of ``k`` distinct digits 1-9 that add up to ``n``."""

    def walk(start: int, count: int, remaining: int) -> Iterator[tuple[int, ...]]:
        if count <= 0 or remaining <= 0:
            if count == 0 and remaining == 0:
                yield ()
            return
        for digit in range(start, 10):
            for rest in walk(digit + 1, count - 1, remaining - digit):
                yield (digit, *rest)

    return [list(combo) for combo in walk(1, k, n)]


def generate_parentheses(n: int) -> list[str]:
    """Return every well-formed string of ``n`` pairs of parentheses."""

    def walk(prefix: str, opened: int, closed: int) -> Iterator[str]:
        if len(prefix) == 2 * n:
            yield prefix
            return
        if opened < n:
            yield from walk(prefix + "(", opened + 1, closed)
        if closed < opened:
            yield from walk(prefix + ")", opened, closed + 1)

    return list(walk("", 0, 0))


def combination_sum(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Return combinations of ``candidates`` (reusable) summing to ``target``.

    Every candidate must be positive.
    """
    values = list(candidates)
    if any(value <= 0 for value in values):
        raise ValueError("candidates must all be positive")

    def walk(index: int, remaining: int) -> Iterator[tuple[int, ...]]:
        if index == len(values):
            if remaining == 0:
                yield ()
            return
        value = values[index]
        if remaining - value >= 0:
            for rest in walk(index, remaining - value):
                yield (value, *rest)
        yield from walk(index + 1, remaining)

    return [list(combo) for combo in walk(0, target)]


def combination_sum2(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Return unique combinations of ``candidates`` (each used once) summing to ``target``."""
    values = sorted(candidates)

    def walk(start: int, remaining: int) -> Iterator[tuple[int, ...]]:
        if remaining == 0:
            yield ()
            return
        for index in range(start, len(values)):
            value = values[index]
            if index > start and value == values[index - 1]:
                continue
            if value > remaining:
                break
            for rest in walk(index + 1, remaining - value):
                yield (value, *rest)

    return [list(combo) for combo in walk(0, target)]


def _subsequences(values: Sequence[int]) -> Iterator[tuple[int, ...]]:
    """Yield every subsequence, taking each element before skipping it."""
    if not values:
        yield ()
        return
    head, tail = values[0], values[1:]
    for rest in _subsequences(tail):
        yield (head, *rest)
    yield from _subsequences(tail)


def subsets(nums: Sequence[int]) -> list[list[int]]:
    """Return every subset of ``nums``, the full set first and the empty set last."""
    return [list(subset) for subset in _subsequences(list(nums))]


def _ascii_lower(char: str) -> str:
    return chr(ord(char) + 32) if "A" <= char <= "Z" else char


def _ascii_upper(char: str) -> str:
    return chr(ord(char) - 32) if "a" <= char <= "z" else char


def letter_case_permutations(s: str) -> list[str]:
    """Return ``s`` with every lower/upper choice for each non-digit character.

    Each non-digit branches twice, lower case first, so characters without
    case produce repeated strings.
    """

    def walk(index: int) -> Iterator[str]:
        if index >= len(s):
            yield ""
            return
        char = s[index]
        if "0" <= char <= "9":
            choices = (char,)
        else:
            choices = (_ascii_lower(char), _ascii_upper(char))
        for choice in choices:
            for rest in walk(index + 1):
                yield choice + rest

    return list(walk(0))


def subsequences_with_sum(values: Sequence[int], target: int) -> list[list[int]]:
    """Return every subsequence of ``values`` whose elements add up to ``target``."""
    return [list(seq) for seq in _subsequences(list(values)) if sum(seq) == target]


def first_subsequence_with_sum(values: Sequence[int], target: int) -> list[int] | None:
    """Return the first subsequence summing to ``target``, or ``None`` if there is none."""
    for seq in _subsequences(list(values)):
        if sum(seq) == target:
            return list(seq)
    return None


def count_subsequences_with_sum(values: Sequence[int], target: int) -> int:
    """Count the subsequences of ``values`` whose elements add up to ``target``."""
    return sum(1 for seq in _subsequences(list(values)) if sum(seq) == target)


def _check_length(n: int) -> None:
    if n < 0:
        raise ValueError("length must not be negative")


def binary_strings(n: int) -> list[str]:
    """Return every binary string of length ``n`` in ascending order."""
    _check_length(n)

    def walk(prefix: str) -> Iterator[str]:
        if len(prefix) == n:
            yield prefix
            return
        yield from walk(prefix + "0")
        yield from walk(prefix + "1")

    return list(walk(""))


def binary_strings_without_consecutive_ones(n: int) -> list[str]:
    """Return every binary string of length ``n`` with no two adjacent ones."""
    _check_length(n)

    def walk(prefix: str) -> Iterator[str]:
        if len(prefix) == n:
            yield prefix
            return
        yield from walk(prefix + "0")
        if not prefix or prefix[-1] == "0":
            yield from walk(prefix + "1")

    return list(walk(""))


def increasing_numbers(n: int) -> list[int]:
    """Return all ``n``-digit numbers whose digits strictly increase.

    For a single digit, 0 through 9 are all included.
    """
    if n == 1:
        return list(range(10))

    def walk(start: int, digits: tuple[int, ...]) -> Iterator[int]:
        if len(digits) == n:
            number = 0
            for digit in digits:
                number = number * 10 + digit
            yield number
            return
        for digit in range(start, 10):
            yield from walk(digit + 1, (*digits, digit))

    return list(walk(1, ()))


def permutations(nums: Sequence[int]) -> list[list[int]]:
    """Return every permutation of ``nums``, picking unused positions in order."""
    values = list(nums)

    def walk(used: frozenset[int]) -> Iterator[tuple[int, ...]]:
        if len(used) >= len(values):
            yield ()
            return
        for position, value in enumerate(values):
            if position not in used:
                for rest in walk(used | {position}):
                    yield (value, *rest)

    return [list(perm) for perm in walk(frozenset())]


def swap_permutations(nums: Sequence[int]) -> list[list[int]]:
    """Return every permutation of ``nums`` in the order produced by in-place swapping."""
    values = list(nums)
    result: list[list[int]] = []

    def walk(index: int) -> None:
        if index >= len(values):
            result.append(values.copy())
            return
        for other in range(index, len(values)):
            values[index], values[other] = values[other], values[index]
            walk(index + 1)
            values[index], values[other] = values[other], values[index]

    walk(0)
    return result


def subset_sums(values: Sequence[int]) -> list[int]:
    """Return the sums of all subsets of ``values`` in ascending order."""
    return sorted(sum(subset) for subset in _subsequences(list(values)))