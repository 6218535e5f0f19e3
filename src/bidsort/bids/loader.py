"""
CSV loading for bid records.

Reads a delimited export (one header row, one bid per row) into a list
of :class:`~bidsort.bids.models.Bid`. Bad data never raises out of
``load_bids``: file-level and row-level problems come back as
``LoadError`` values on the ``LoadResult``.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import Enum

import pandas as pd
from loguru import logger

from bidsort.core.exceptions import DataProcessingError, FileIOError

from .currency import parse_amount
from .models import Bid

# Column positions in the eBid monthly sales export
DEFAULT_COLUMNS: dict[str, int] = {"title": 0, "bid_id": 1, "amount": 4, "fund": 8}

# Fields that may not be blank; a blank amount reads as zero, a blank fund is kept
REQUIRED_FIELDS = ("bid_id", "title")

# First field of the placeholder left where a too-long row was read
_LONG_ROW_MARKER = "\x00long-row\x00"


class LoadErrorKind(Enum):
    FILE_NOT_FOUND = "file_not_found"
    UNREADABLE_FILE = "unreadable_file"
    MISSING_COLUMN = "missing_column"
    MISSING_FIELD = "missing_field"
    BAD_AMOUNT = "bad_amount"
    INVALID_RECORD = "invalid_record"
    EXTRA_FIELDS = "extra_fields"


# Kinds that abort the whole load (no bids are returned)
FILE_LEVEL_KINDS = frozenset(
    {LoadErrorKind.FILE_NOT_FOUND, LoadErrorKind.UNREADABLE_FILE, LoadErrorKind.MISSING_COLUMN}
)


@dataclass
class LoadError:
    """A problem found while loading.

    Attributes:
        kind: What went wrong.
        message: Human-readable detail.
        line: 1-based line in the file (the header is line 1). None for
            file-level errors.
    """

    kind: LoadErrorKind
    message: str
    line: int | None = None

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"line {self.line}: {self.message}"


@dataclass
class LoadResult:
    """Bids read from a file plus any errors encountered."""

    bids: list[Bid] = field(default_factory=list)
    errors: list[LoadError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def failed(self) -> bool:
        """True when a file-level error prevented loading any rows."""
        return any(e.kind in FILE_LEVEL_KINDS for e in self.errors)

    def raise_for_failure(self) -> None:
        """Raise FileIOError if a file-level error prevented loading."""
        if self.failed:
            raise FileIOError("; ".join(str(e) for e in self.errors if e.kind in FILE_LEVEL_KINDS))


def load_bids(
    csv_path: str,
    *,
    columns: dict[str, int] | None = None,
    currency_symbol: str = "$",
    delimiter: str = ",",
    encoding: str = "utf-8",
) -> LoadResult:
    """
    Load bids from a delimited file.

    Args:
        csv_path: Path to the file.
        columns: Zero-based column position for each of ``title``,
            ``bid_id``, ``amount`` and ``fund``. Defaults to the eBid layout.
        currency_symbol: Character stripped from amounts before conversion.
        delimiter: Field separator.
        encoding: Text encoding; undecodable bytes are replaced.

    Returns:
        A LoadResult with the well-formed rows in file order.
    """
    columns = columns or DEFAULT_COLUMNS
    logger.info(f"Loading CSV file {csv_path}")

    # Rows wider than the header, in file order; each leaves a marker row in the frame
    long_rows: deque[list[str]] = deque()

    def _hold_long_row(fields: list[str]) -> list[str]:
        long_rows.append(fields)
        return [_LONG_ROW_MARKER]

    try:
        # The header is read as a data row so it fixes the width and no index column is inferred
        df = pd.read_csv(
            csv_path,
            sep=delimiter,
            header=None,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=False,
            engine="python",
            on_bad_lines=_hold_long_row,
            encoding=encoding,
            encoding_errors="replace",
        )
    except FileNotFoundError:
        logger.warning(f"CSV file not found: {csv_path}")
        return LoadResult(errors=[LoadError(LoadErrorKind.FILE_NOT_FOUND, f"File not found: {csv_path}")])
    except (pd.errors.ParserError, pd.errors.EmptyDataError, OSError) as e:
        logger.warning(f"Could not read {csv_path}: {e}")
        return LoadResult(errors=[LoadError(LoadErrorKind.UNREADABLE_FILE, f"Could not read {csv_path}: {e}")])

    width = df.shape[1]
    missing = sorted(name for name, position in columns.items() if position >= width)
    if missing:
        message = f"{csv_path} has {width} columns; no column for {', '.join(missing)}"
        logger.warning(message)
        return LoadResult(errors=[LoadError(LoadErrorKind.MISSING_COLUMN, message)])

    result = LoadResult()
    next_line = 1
    for offset, row in enumerate(df.itertuples(index=False, name=None)):
        fields = list(row)
        if fields[0] == _LONG_ROW_MARKER:
            fields = long_rows.popleft()
        line = next_line
        next_line += 1 + sum(value.count("\n") for value in fields if isinstance(value, str))
        if offset == 0 or _is_blank(fields):
            continue

        if len(fields) > width and not _is_blank(fields[width:]):
            error = LoadError(LoadErrorKind.EXTRA_FIELDS, f"{len(fields)} fields, header has {width}")
        else:
            error = _append_row(result.bids, fields[:width], columns, currency_symbol)
        if error is not None:
            error.line = line
            logger.warning(f"Skipping {error}")
            result.errors.append(error)

    logger.info(f"{len(result.bids)} bids read from {csv_path}")
    return result


def _is_blank(values: list) -> bool:
    return all(pd.isna(value) or not str(value).strip() for value in values)


def _append_row(bids: list[Bid], row: list, columns: dict[str, int], currency_symbol: str) -> LoadError | None:
    """Build a Bid from one row and append it, or return what was wrong."""
    values = {}
    for name, position in columns.items():
        value = row[position]
        if pd.isna(value) or (name in REQUIRED_FIELDS and not value.strip()):
            return LoadError(LoadErrorKind.MISSING_FIELD, f"no value for {name} (column {position})")
        values[name] = value

    try:
        amount = parse_amount(values["amount"], strip_char=currency_symbol)
    except DataProcessingError as e:
        return LoadError(LoadErrorKind.BAD_AMOUNT, str(e))

    try:
        bids.append(Bid(bid_id=values["bid_id"], title=values["title"], fund=values["fund"], amount=amount))
    except ValueError as e:
        return LoadError(LoadErrorKind.INVALID_RECORD, str(e))
    return None
