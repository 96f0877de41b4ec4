from typing import Iterable, List, Tuple

from .key import ExpectedKey, KeysSpec, join_keys

Layout = Tuple[Tuple[ExpectedKey, ...], ...]


class ExpectedKeyboardBuilder:
    """
    Mutable matrix of expected keys. Rows are numbered from 1 (the top row) and every
    mutator returns the builder so calls can be chained.
    """

    def __init__(self, rows: Iterable[Iterable[ExpectedKey]] = ()) -> None:
        self._rows: List[List[ExpectedKey]] = [list(row) for row in rows]

    def _row(self, row: int) -> List[ExpectedKey]:
        if row < 1 or row > len(self._rows):
            raise ValueError(f"Row {row} is out of range, keyboard has {len(self._rows)} rows")
        return self._rows[row - 1]

    def set_keys_of_row(self, row: int, *keys: KeysSpec) -> "ExpectedKeyboardBuilder":
        if row < 1:
            raise ValueError(f"Row {row} is out of range, rows start at 1")
        while len(self._rows) < row:
            self._rows.append([])
        self._rows[row - 1] = list(join_keys(*keys))
        return self

    def add_keys_on_the_left_of_row(self, row: int, *keys: KeysSpec) -> "ExpectedKeyboardBuilder":
        self._row(row)[:0] = join_keys(*keys)
        return self

    def add_keys_on_the_right_of_row(self, row: int, *keys: KeysSpec) -> "ExpectedKeyboardBuilder":
        self._row(row).extend(join_keys(*keys))
        return self

    def replace_key_of_label(self, label: str, *keys: KeysSpec) -> "ExpectedKeyboardBuilder":
        """Replace every key labelled `label` with `keys`, which may be more than one key."""
        replacement = join_keys(*keys)
        self._rows = [
            [new for k in row for new in (replacement if k.label == label else (k,))] for row in self._rows
        ]
        return self

    def replace_keys_of_all(self, old: ExpectedKey, new: ExpectedKey) -> "ExpectedKeyboardBuilder":
        self._rows = [[new if k == old else k for k in row] for row in self._rows]
        return self

    def add_more_keys_of(self, label: str, *more_keys: KeysSpec) -> "ExpectedKeyboardBuilder":
        self._rows = [[k.with_more_keys(*more_keys) if k.label == label else k for k in row] for row in self._rows]
        return self

    def to_upper_case(self, locale: str) -> "ExpectedKeyboardBuilder":
        self._rows = [[k.to_upper_case(locale) for k in row] for row in self._rows]
        return self

    def build(self) -> Layout:
        return tuple(tuple(row) for row in self._rows)
