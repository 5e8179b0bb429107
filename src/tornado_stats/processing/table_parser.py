"""
table_parser.py
Turns the fetched page text into a `Dataset`.

Public API:
    find_table_offset(body: str, pattern: str = "JAN") -> int
    truncate_body(body: str, pattern: str = "JAN") -> str
    split_rows(truncated: str) -> List[str]
    scan_row(row: str, month: int, dataset: Dataset) -> Dataset
    write_slot(dataset: Dataset, slot: int, numeral: str, month: int) -> Dataset
    build_dataset(rows: List[str], dataset: Dataset | None = None) -> Dataset
    process(body: str, pattern: str = "JAN") -> Dataset

Row layout
----------
Each data row starts with a month abbreviation followed by three metric
groups (count, deaths, killers). Every group has one column per year in
`YEARS` order plus a trailing column that is skipped:

    JAN   17   29    4   67   35     -    0    0    0    2     -    0    0    0    1
          |---- count ------| skip   |--- deaths ---| skip   |--- killers --| skip

A lone "-" in the first column of a group means zero.
"""

from enum import Enum
from typing import List, Optional
import logging

from ..errors import MalformedData, ParseError, TableNotFound
from ..models import METRICS, YEARS, Dataset, Month

logger = logging.getLogger(__name__)

ROWS_PER_TABLE = len(Month)
LEAD_IN = 3
SLOTS_PER_GROUP = len(YEARS) + 1
SLOT_COUNT = SLOTS_PER_GROUP * len(METRICS)
# "-" only stands for zero in the first column of a group
DASH_SLOTS = frozenset(range(0, SLOT_COUNT, SLOTS_PER_GROUP))
DIGITS = frozenset("0123456789")


class ScanState(Enum):
    IDLE = "idle"
    COLLECTING = "collecting"


def find_table_offset(body: str, pattern: str = Month.JAN.abbreviation) -> int:
    """
    Return the offset 3 characters before the first occurrence of `pattern`.

    Raises:
        TableNotFound: if `body` is empty or never contains `pattern`.
    """
    index = body.find(pattern) if body and pattern else -1
    if index < 0:
        raise TableNotFound(f"No offset found: {pattern!r} does not appear in the page")
    return max(index - LEAD_IN, 0)


def truncate_body(body: str, pattern: str = Month.JAN.abbreviation) -> str:
    """
    Cut everything leading up to the first data row.

    The lead-in kept before the marker is dropped up to and including the
    last newline it contains, so the result always starts on the marker row.
    """
    offset = find_table_offset(body, pattern)
    lead_in = body[offset:body.find(pattern, offset)]
    if "\n" in lead_in:
        offset += lead_in.rindex("\n") + 1
    logger.info(f"Table starts at offset {offset}")
    return body[offset:]


def split_rows(truncated: str) -> List[str]:
    """Split a truncated body at newlines and keep the 12 month rows."""
    return truncated.split("\n")[:ROWS_PER_TABLE]


def write_slot(dataset: Dataset, slot: int, numeral: str, month: int) -> Dataset:
    """
    Store `numeral` in the (metric, year) cell that `slot` points to.

    Slots 4, 9 and 14 are the skipped columns; the dataset is returned
    unchanged for them.
    """
    if not numeral or not set(numeral) <= DIGITS:
        raise ParseError(f"Not a non-negative integer: {numeral!r} (slot {slot}, month {month})")
    if not 0 <= slot < SLOT_COUNT:
        raise MalformedData(f"Row for month {month} has more than {SLOT_COUNT} numeric fields")

    group, position = divmod(slot, SLOTS_PER_GROUP)
    if position >= len(YEARS):
        return dataset

    metric, year = METRICS[group], YEARS[position]
    setattr(dataset.record(year, month), metric, int(numeral))
    logger.debug(f"month={month} slot={slot}: {year}.{metric} = {numeral}")
    return dataset


def scan_row(row: str, month: int, dataset: Dataset) -> Dataset:
    """
    Walk `row` one character at a time and file every digit run into its slot.

    A number still being collected when the row ends is dropped.
    """
    month = Month.from_number(month)
    state = ScanState.IDLE
    numeral = ""
    slot = 0

    for char in row:
        if char in DIGITS:
            numeral += char
            state = ScanState.COLLECTING
        elif state is ScanState.COLLECTING:
            dataset = write_slot(dataset, slot, numeral, month)
            numeral = ""
            state = ScanState.IDLE
            slot += 1
        elif char == "-" and slot in DASH_SLOTS:
            dataset = write_slot(dataset, slot, "0", month)
            slot += 1

    return dataset


def build_dataset(rows: List[str], dataset: Optional[Dataset] = None) -> Dataset:
    """
    Scan the 12 month rows in order (row 0 is January).

    Rows past the twelfth are ignored.

    Raises:
        MalformedData: if fewer than 12 rows are given.
    """
    if len(rows) < ROWS_PER_TABLE:
        raise MalformedData(f"Expected {ROWS_PER_TABLE} month rows, found {len(rows)}")
    if dataset is None:
        dataset = Dataset.empty()

    for index, row in enumerate(rows[:ROWS_PER_TABLE]):
        dataset = scan_row(row, index + 1, dataset)

    logger.info(f"Scanned {ROWS_PER_TABLE} rows into {len(dataset)} month records")
    return dataset


def process(body: str, pattern: str = Month.JAN.abbreviation) -> Dataset:
    """
    Full scan of a fetched page:
        1. Drop everything before the first data row
        2. Split into the 12 month rows
        3. Scan each row into a fresh Dataset
    """
    return build_dataset(split_rows(truncate_body(body, pattern)))
