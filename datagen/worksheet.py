"""In-memory worksheet adapter and debounced recomputation.

The worksheet follows the DataGen sheet layout: variable names on row 3 and
up to 200 observations on rows 4-203 of columns B-F. Rows are numbered
from 1 and columns are lettered, as in a spreadsheet.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Dict, List, Optional, Sequence

import pandas as pd

from .data_processing import clean_sample, load_worksheet
from .generation import DistributionSpec, UniformSource, generate

logger = logging.getLogger(__name__)

HEADER_ROW = 3
FIRST_DATA_ROW = 4
LAST_DATA_ROW = 203
VARIABLE_COLUMNS = ("B", "C", "D", "E", "F")
DEBOUNCE_SECONDS = 0.5


def column_letter(index: int) -> str:
    """Return the spreadsheet letter for a zero-based column index."""
    if index < 0:
        raise ValueError(f"Column index must be >= 0, got {index}")
    letters = ""
    index += 1
    while index:
        index, rem = divmod(index - 1, 26)
        letters = chr(ord("A") + rem) + letters
    return letters


def column_index(letter: str) -> int:
    """Return the zero-based index of a spreadsheet column letter."""
    letter = letter.strip().upper()
    if not letter.isalpha() or not letter.isascii():
        raise ValueError(f"Invalid column letter: {letter!r}")
    index = 0
    for ch in letter:
        index = index * 26 + (ord(ch) - ord("A") + 1)
    return index - 1


class Worksheet:
    """A grid of raw cell values backed by a :class:`pandas.DataFrame`.

    The frame is indexed by sheet row number and labelled by column letter.
    Cells hold whatever was read or written; cleaning happens when samples
    are read out.
    """

    def __init__(self, frame: Optional[pd.DataFrame] = None):
        frame = pd.DataFrame() if frame is None else frame.copy()
        frame.index = range(1, len(frame) + 1)
        frame.columns = [column_letter(i) for i in range(frame.shape[1])]
        self.frame = frame.astype(object)

    @classmethod
    def from_csv(cls, filepath: str) -> "Worksheet":
        return cls(load_worksheet(filepath))

    def to_csv(self, filepath: str) -> None:
        self.frame.to_csv(filepath, header=False, index=False)

    def cell(self, row: int, column: str):
        column = column.upper()
        if column not in self.frame.columns or row not in self.frame.index:
            return None
        value = self.frame.at[row, column]
        return None if pd.isna(value) else value

    def column_cells(
        self, column: str, first_row: int = FIRST_DATA_ROW, last_row: int = LAST_DATA_ROW
    ) -> List[object]:
        return [self.cell(row, column) for row in range(first_row, last_row + 1)]

    def header(self, column: str) -> Optional[str]:
        value = self.cell(HEADER_ROW, column)
        if value is None or not str(value).strip():
            return None
        return str(value).strip()

    def read_variables(
        self, columns: Sequence[str] = VARIABLE_COLUMNS
    ) -> Dict[str, List[float]]:
        """Return cleaned samples keyed by variable name.

        Blank headers default to ``"Variable i"`` (1-based position). A
        repeated header is disambiguated with its column letter.
        """
        variables: Dict[str, List[float]] = {}
        for i, column in enumerate(columns, start=1):
            name = self.header(column) or f"Variable {i}"
            if name in variables:
                name = f"{name} ({column.upper()})"
            variables[name] = clean_sample(self.column_cells(column), name=name)
        return variables

    def write_column(
        self, column: str, values: Sequence[float], start_row: int = FIRST_DATA_ROW
    ) -> None:
        """Write ``values`` downward from ``start_row``, growing the grid."""
        if start_row < 1:
            raise ValueError(f"start_row must be >= 1, got {start_row}")
        if len(values) == 0:
            return
        column = column.upper()
        last_row = start_row + len(values) - 1
        n_rows = max(len(self.frame), last_row)
        n_cols = max(self.frame.shape[1], column_index(column) + 1)
        self.frame = self.frame.reindex(
            index=range(1, n_rows + 1),
            columns=[column_letter(i) for i in range(n_cols)],
        ).astype(object)
        self.frame.loc[start_row:last_row, column] = list(values)

    def generate_into(
        self,
        column: str,
        spec: DistributionSpec,
        source: Optional[UniformSource] = None,
        start_row: int = FIRST_DATA_ROW,
    ) -> List[float]:
        """Generate values for ``spec`` and write them into ``column``.

        Raises:
            ValidationError: If ``spec`` is invalid. The sheet is left
                untouched.
        """
        values = generate(spec, source)
        self.write_column(column, values, start_row=start_row)
        logger.info(
            "Wrote %d %s values to column %s from row %d",
            len(values),
            spec.kind.value,
            column.upper(),
            start_row,
        )
        return values


class RecomputeDebouncer:
    """Coalesce bursts of change notifications into one recomputation.

    Each :meth:`notify` cancels the pending timer and starts a new one;
    ``callback`` runs once the sheet has been quiet for ``delay`` seconds.
    A timer that was superseded never runs the callback, even if it had
    already fired and was waiting on the lock.
    """

    def __init__(
        self,
        callback: Callable[[], object],
        delay: float = DEBOUNCE_SECONDS,
        timer_factory: Callable[..., threading.Timer] = threading.Timer,
    ):
        self.callback = callback
        self.delay = delay
        self._timer_factory = timer_factory
        self._lock = threading.Lock()
        self._timer: Optional[threading.Timer] = None
        self._generation = 0

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._timer is not None

    def notify(self) -> None:
        with self._lock:
            self._cancel_locked()
            token = self._generation
            timer = self._timer_factory(self.delay, self._fire, args=(token,))
            timer.daemon = True
            self._timer = timer
            timer.start()

    def flush(self) -> None:
        """Run a pending recomputation now instead of waiting."""
        with self._lock:
            had_pending = self._timer is not None
            self._cancel_locked()
        if had_pending:
            self.callback()

    def cancel(self) -> None:
        with self._lock:
            self._cancel_locked()

    def _cancel_locked(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        self._generation += 1

    def _fire(self, token: int) -> None:
        with self._lock:
            if token != self._generation:
                return
            self._timer = None
            self._generation += 1
        try:
            self.callback()
        except Exception:
            logger.exception("Recomputation failed")
