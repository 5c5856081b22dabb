"""Backtracking solvers for grid puzzles, word problems and digit swaps."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

EMPTY = "."
_DIGITS = "123456789"


def _box_of(row: int, col: int) -> int:
    return (row // 3) * 3 + col // 3


def solve_sudoku(board: Sequence[Sequence[str]]) -> list[list[str]]:
    """Return a solved copy of a 9x9 sudoku board, with ``"."`` marking empty cells.

    Cells are filled in row-major order, trying digits 1 to 9 in turn.
    Raises ``ValueError`` if the board is not 9x9 or has no solution.
    """
    grid = [list(row) for row in board]
    if len(grid) != 9 or any(len(row) != 9 for row in grid):
        raise ValueError("sudoku board must be 9x9")

    in_row: list[set[str]] = [set() for _ in range(9)]
    in_col: list[set[str]] = [set() for _ in range(9)]
    in_box: list[set[str]] = [set() for _ in range(9)]
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell != EMPTY:
                in_row[r].add(cell)
                in_col[c].add(cell)
                in_box[_box_of(r, c)].add(cell)

    def place(position: int) -> bool:
        while position < 81 and grid[position // 9][position % 9] != EMPTY:
            position += 1
        if position == 81:
            return True
        r, c = divmod(position, 9)
        box = _box_of(r, c)
        for digit in _DIGITS:
            if digit in in_row[r] or digit in in_col[c] or digit in in_box[box]:
                continue
            grid[r][c] = digit
            in_row[r].add(digit)
            in_col[c].add(digit)
            in_box[box].add(digit)
            if place(position + 1):
                return True
            grid[r][c] = EMPTY
            in_row[r].discard(digit)
            in_col[c].discard(digit)
            in_box[box].discard(digit)
        return False

    if not place(0):
        raise ValueError("sudoku board has no solution")
    return grid


def solve_n_queens(n: int) -> list[list[str]]:
    """Return every placement of ``n`` non-attacking queens on an ``n`` x ``n`` board.

    Queens are placed column by column, trying rows top to bottom; each
    board is a list of row strings with ``"Q"`` for a queen and ``"."`` elsewhere.
    """
    if n < 0:
        raise ValueError("board size must not be negative")

    board = [[EMPTY] * n for _ in range(n)]
    used_rows: set[int] = set()
    used_diagonals: set[int] = set()
    used_anti_diagonals: set[int] = set()
    solutions: list[list[str]] = []

    def place(col: int) -> None:
        if col == n:
            solutions.append(["".join(row) for row in board])
            return
        for row in range(n):
            if row in used_rows or row - col in used_diagonals or row + col in used_anti_diagonals:
                continue
            board[row][col] = "Q"
            used_rows.add(row)
            used_diagonals.add(row - col)
            used_anti_diagonals.add(row + col)
            place(col + 1)
            board[row][col] = EMPTY
            used_rows.discard(row)
            used_diagonals.discard(row - col)
            used_anti_diagonals.discard(row + col)

    place(0)
    return solutions


def word_exists(board: Sequence[Sequence[str]], word: str) -> bool:
    """Tell whether ``word`` can be traced through adjacent cells, using each cell once."""
    if not word:
        raise ValueError("word must not be empty")
    grid = [list(row) for row in board]
    if not grid or not grid[0]:
        return False
    rows = len(grid)
    cols = len(grid[0])
    visited: set[tuple[int, int]] = set()

    def trace(r: int, c: int, index: int) -> bool:
        if index == len(word) - 1:
            return True
        visited.add((r, c))
        for dr, dc in ((1, 0), (-1, 0), (0, 1), (0, -1)):
            nr, nc = r + dr, c + dc
            if (
                0 <= nr < rows
                and 0 <= nc < cols
                and (nr, nc) not in visited
                and grid[nr][nc] == word[index + 1]
                and trace(nr, nc, index + 1)
            ):
                return True
        visited.discard((r, c))
        return False

    return any(
        grid[r][c] == word[0] and trace(r, c, 0)
        for r in range(rows)
        for c in range(cols)
    )


_MOVES = (("D", 1, 0), ("L", 0, -1), ("R", 0, 1), ("U", -1, 0))


def rat_in_maze(maze: Sequence[Sequence[int]]) -> list[str]:
    """Return every path from the top-left to the bottom-right of a square maze.

    Open cells hold 1. Paths are strings of ``D``, ``L``, ``R`` and ``U`` moves,
    explored in that order; no cell is visited twice on one path.
    """
    grid = [list(row) for row in maze]
    if not grid:
        return []
    end = len(grid) - 1
    blocked: set[tuple[int, int]] = set()
    paths: list[str] = []

    def walk(r: int, c: int, path: str) -> None:
        if r == end and c == end:
            paths.append(path)
            return
        blocked.add((r, c))
        for letter, dr, dc in _MOVES:
            nr, nc = r + dr, c + dc
            if 0 <= nr <= end and 0 <= nc <= end and (nr, nc) not in blocked and grid[nr][nc] == 1:
                walk(nr, nc, path + letter)
        blocked.discard((r, c))

    walk(0, 0, "")
    return paths


def word_break(s: str, words: Iterable[str]) -> bool:
    """Tell whether ``s`` can be split into a sequence of words from ``words``."""
    vocabulary = set(words)
    failed: set[int] = set()

    def can_split(start: int) -> bool:
        if start >= len(s):
            return True
        if start in failed:
            return False
        for end in range(start + 1, len(s) + 1):
            if s[start:end] in vocabulary and can_split(end):
                return True
        failed.add(start)
        return False

    return can_split(0)


def largest_after_swaps(s: str, k: int) -> str:
    """Return the largest string reachable from ``s`` with at most ``k`` swaps.

    At the n-th swap only positions from n onwards may move to the front of a swap.
    """
    if k < 0:
        raise ValueError("number of swaps must not be negative")
    digits = list(s)
    best = s

    def explore(count: int, start: int) -> None:
        nonlocal best
        current = "".join(digits)
        if current > best:
            best = current
        if count == k:
            return
        for i in range(start, len(digits) - 1):
            for j in range(i + 1, len(digits)):
                if digits[i] < digits[j]:
                    digits[i], digits[j] = digits[j], digits[i]
                    explore(count + 1, start + 1)
                    digits[i], digits[j] = digits[j], digits[i]

    explore(0, 0)
    return best