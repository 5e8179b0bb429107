"""
Data model for the monthly tornado table.

A `Dataset` is created with all 4 x 12 `MonthRecord`s already in place.
Scanning only fills in field values; years and months are never added or
removed afterwards.
"""

from dataclasses import dataclass, asdict
from enum import IntEnum
from typing import Any, Dict, Iterator, Optional, Tuple

from .errors import MalformedData

# Column order of the source table, newest year first.
YEARS: Tuple[int, ...] = (2016, 2015, 2014, 2013)

METRICS: Tuple[str, ...] = ("count", "deaths", "killers")


class Month(IntEnum):
    JAN = 1
    FEB = 2
    MAR = 3
    APR = 4
    MAY = 5
    JUN = 6
    JUL = 7
    AUG = 8
    SEP = 9
    OCT = 10
    NOV = 11
    DEC = 12

    @property
    def abbreviation(self) -> str:
        """Upper-case three letter name, as printed at the start of each row."""
        return self.name

    @classmethod
    def from_number(cls, number: int) -> "Month":
        try:
            return cls(number)
        except ValueError as exc:
            raise MalformedData(f"Month number out of range: {number}") from exc


@dataclass
class MonthRecord:
    """Statistics for one month of one year. Unseen fields stay None."""
    count: Optional[int] = None
    deaths: Optional[int] = None
    killers: Optional[int] = None

    def as_dict(self) -> Dict[str, Optional[int]]:
        return asdict(self)


class Dataset:
    """
    Fixed-shape table of `MonthRecord`s keyed by year, then by `Month`.

    Example:
        data = Dataset.empty()
        data.record(2016, Month.JAN).count = 17
    """

    def __init__(self, years: Dict[int, Dict[Month, MonthRecord]]):
        self._years = years

    @classmethod
    def empty(cls) -> "Dataset":
        return cls({year: {month: MonthRecord() for month in Month} for year in YEARS})

    @property
    def years(self) -> Tuple[int, ...]:
        return tuple(self._years)

    def record(self, year: int, month: int) -> MonthRecord:
        """Return the record for (year, month); raise KeyError for an unknown year."""
        if year not in self._years:
            raise KeyError(f"Unknown year: {year}")
        return self._years[year][Month.from_number(month)]

    def records(self) -> Iterator[Tuple[int, Month, MonthRecord]]:
        for year, months in self._years.items():
            for month, record in months.items():
                yield year, month, record

    def __len__(self) -> int:
        return sum(len(months) for months in self._years.values())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dataset):
            return NotImplemented
        return self._years == other._years

    def __repr__(self) -> str:
        return f"Dataset({self.as_dict()!r})"

    def as_dict(self) -> Dict[int, Dict[str, Dict[str, Any]]]:
        """JSON-friendly rendering: {2016: {"jan": {"count": ..., ...}, ...}, ...}."""
        return {
            year: {month.abbreviation.lower(): record.as_dict() for month, record in months.items()}
            for year, months in self._years.items()
        }
