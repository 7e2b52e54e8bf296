from typing import Iterable, Iterator, List, Sequence, Tuple
from ortools.sat.python import cp_model


def iter_windows(size: int, lengths: Iterable[int]) -> Iterator[Tuple[int, int]]:
    """
    Yield every `(start, length)` window that fits inside a sequence of `size`.

    Lengths that are not positive or do not fit are skipped.
    """
    for length in lengths:
        if length <= 0:
            continue
        for start in range(size - length + 1):
            yield start, length


def count_windows(size: int, lengths: Iterable[int]) -> int:
    """Number of windows `iter_windows` yields for the same arguments."""
    return sum(1 for _ in iter_windows(size, lengths))


def negated_bounded_span(
    works: Sequence[cp_model.IntVar], start: int, length: int
) -> List[cp_model.IntVar]:
    """
    Filters an isolated sub-sequence of variables assigned to True.

    Extracts the span `works[start:start + length]`, negates it, and surrounds it
    with the variables immediately left and right of it (when they exist) in
    non negated form.

    Args:
        works: The boolean variables to extract the span from.
        start: Index of the first variable of the span.
        length: Number of variables in the span.

    Returns:
        A list of literals whose disjunction is false exactly when the span is
        all True and bounded by False variables or by the ends of `works`.
    """
    if start < 0 or length <= 0 or start + length > len(works):
        raise IndexError(
            f"Span (start={start}, length={length}) does not fit a sequence of {len(works)}"
        )

    sequence = []
    if start > 0:
        sequence.append(works[start - 1])
    for i in range(length):
        sequence.append(works[start + i].Not())
    if start + length < len(works):
        sequence.append(works[start + length])
    return sequence
