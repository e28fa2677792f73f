"""
Data models for decadal census records
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

class TableInvariantError(AssertionError):
    """Raised when the census table does not hold a decade it must hold"""
    pass

@dataclass(frozen=True)
class CensusRecord:
    """Represents one decade's census count"""
    year: int
    population: float

@dataclass(frozen=True)
class InterpolationRequest:
    """Represents the inputs needed to estimate one year between two decades"""
    target_year: int
    lower: CensusRecord
    upper: CensusRecord

    def estimate(self) -> float:
        """Linearly interpolate the population for the target year

        Returns:
            float: Estimated population
        """
        y0 = self.lower.population
        y1 = self.upper.population
        x0 = self.lower.year
        x1 = self.upper.year
        return y0 + ((y1 - y0) * (self.target_year - x0)) / (x1 - x0)

@dataclass(frozen=True)
class PopulationEstimate:
    """Represents the answer to one population query"""
    year: int
    population: float
    exact: bool

class CensusTable:
    """Read-only, year-ordered sequence of census records"""

    def __init__(self, records: Iterable[CensusRecord], decade_span: int = 10):
        self._records: Tuple[CensusRecord, ...] = tuple(records)
        self._decade_span = decade_span

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[CensusRecord]:
        return iter(self._records)

    def __getitem__(self, index: int) -> CensusRecord:
        return self._records[index]

    def __repr__(self) -> str:
        if not self._records:
            return "CensusTable([])"
        return f"CensusTable({len(self)} records, {self._records[0].year}-{self._records[-1].year})"

    @property
    def years(self) -> Tuple[int, ...]:
        return tuple(record.year for record in self._records)

    @property
    def populations(self) -> Tuple[float, ...]:
        return tuple(record.population for record in self._records)

    def find(self, year: int) -> CensusRecord:
        """Find the record for an exact decade year

        Args:
            year (int): Decade year to look up

        Returns:
            CensusRecord: The matching record

        Raises:
            TableInvariantError: If no record holds that year
        """
        for record in self._records:
            if record.year == year:
                return record
        raise TableInvariantError(f"Census table has no record for {year}")

    def bounding_pair(self, year: int) -> Tuple[CensusRecord, CensusRecord]:
        """Find the decade records immediately below and above a year"""
        lower_year = year - year % self._decade_span
        return self.find(lower_year), self.find(lower_year + self._decade_span)
