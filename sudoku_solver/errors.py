"""Exception types raised by the solving engine. Every error derives from SudokuError so callers (CLI, HTTP tool API) can catch one base class."""

# errors.py
from __future__ import annotations


class SudokuError(Exception):
    """Base class for all puzzle errors."""


class InputParseError(SudokuError):
    def __init__(self, detail: str = ""):
        msg = "Unable to parse the input puzzle"
        super().__init__(f"{msg}: {detail}" if detail else msg)


class InputLengthError(SudokuError):
    def __init__(self, length: int):
        self.length = length
        super().__init__(
            f"Input length of {length} is not a supported puzzle size "
            "(expected the fourth power of a box dimension between 2 and 10)"
        )


class OutputParseError(SudokuError):
    def __init__(self, detail: str = ""):
        msg = "Unable to format the puzzle for output"
        super().__init__(f"{msg}: {detail}" if detail else msg)


class ConflictingInputError(SudokuError):
    def __init__(self, index: int | None = None, value: int | None = None):
        self.index = index
        self.value = value
        if index is None:
            super().__init__("The given digits conflict with each other")
        else:
            super().__init__(f"Given digit {value} at index {index} appears more than once in its row, column or box")


class ValueNotPossibleError(SudokuError):
    def __init__(self, index: int, value: int):
        self.index = index
        self.value = value
        super().__init__(f"Value {value} is not a candidate of cell {index}")


class InvalidLocationError(SudokuError):
    def __init__(self, index: int | str):
        # an index, or an r{row}c{col} key from the tool layer
        self.index = index
        super().__init__(f"Cell {index} is outside the puzzle")


class IllegalOperationError(SudokuError):
    pass


class ExcessiveSolutionsError(SudokuError):
    def __init__(self, cap: int):
        self.cap = cap
        super().__init__(f"The puzzle has more than {cap} solutions")


class NoSolutionError(SudokuError):
    def __init__(self):
        super().__init__("The puzzle has no solution")


class MultipleSolutionError(SudokuError):
    def __init__(self, count: int):
        self.count = count
        super().__init__(f"The puzzle has {count} solutions")


class HasNotBeenSolvedError(SudokuError):
    def __init__(self):
        super().__init__("The puzzle has not been solved yet")


class HumanSolveError(SudokuError):
    def __init__(self, remaining: int | None = None):
        self.remaining = remaining
        msg = "No technique could make progress"
        if remaining is not None:
            msg += f" with {remaining} cells remaining"
        super().__init__(msg)


class NotSolvedError(SudokuError):
    """Raised when a grid is checked against its solution and is incomplete or wrong."""

    def __init__(self, missing: int, conflicts: int):
        self.missing = missing
        self.conflicts = conflicts
        super().__init__(f"Puzzle is not solved: {missing} cells missing, {conflicts} cells conflict with the solution")
