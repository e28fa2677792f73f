"""
Population lookup and interpolation service
"""

import logging
import re
from typing import Optional

from nj_population.config import QUERY_CONFIG
from nj_population.models.census import CensusTable, InterpolationRequest, PopulationEstimate

logger = logging.getLogger(__name__)

class PopulationServiceError(Exception):
    """Base exception for PopulationService"""
    pass

class InvalidInputError(PopulationServiceError):
    """Raised when a year token holds no usable number"""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Not a valid year: {token!r}")

class OutOfRangeError(PopulationServiceError):
    """Raised when a year falls outside the census coverage"""

    def __init__(self, year: int, earliest: int, latest: int):
        self.year = year
        self.earliest = earliest
        self.latest = latest
        super().__init__(f"Year {year} is outside {earliest}-{latest}")

class PopulationService:
    """Service class for answering population queries against a census table"""

    # Constants
    EARLIEST_YEAR = QUERY_CONFIG["EARLIEST_YEAR"]
    LATEST_YEAR = QUERY_CONFIG["LATEST_YEAR"]
    DECADE_SPAN = QUERY_CONFIG["DECADE_SPAN"]
    SENTINEL = QUERY_CONFIG["SENTINEL"]

    _LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")

    def __init__(self, table: CensusTable):
        self.table = table

    def is_sentinel(self, token: str) -> bool:
        """Check whether a token ends the session

        Only the exact sentinel counts; "00" or "0abc" do not.
        """
        return token.rstrip("\r\n") == self.SENTINEL

    def parse_year(self, token: str) -> int:
        """Parse the leading integer of a token

        Args:
            token (str): Raw user input

        Returns:
            int: Parsed year

        Raises:
            InvalidInputError: If there is no leading integer or it is zero
        """
        match = self._LEADING_INT.match(token)
        year: Optional[int] = int(match.group(1)) if match else None
        if not year:
            raise InvalidInputError(token)
        return year

    def validate_year(self, year: int) -> int:
        """Check that a year lies within the census coverage"""
        if year < self.EARLIEST_YEAR or year > self.LATEST_YEAR:
            raise OutOfRangeError(year, self.EARLIEST_YEAR, self.LATEST_YEAR)
        return year

    def estimate(self, year: int) -> PopulationEstimate:
        """Find or approximate the population for a year

        Decade years are answered from the table directly; other years are
        linearly interpolated between the enclosing decades.

        Args:
            year (int): Year between EARLIEST_YEAR and LATEST_YEAR

        Returns:
            PopulationEstimate: Population and whether it is exact

        Raises:
            OutOfRangeError: If the year is outside the census coverage
        """
        self.validate_year(year)

        if year % self.DECADE_SPAN == 0:
            logger.debug("Interpolation NOT NEEDED here.")
            record = self.table.find(year)
            return PopulationEstimate(year=year, population=record.population, exact=True)

        logger.debug("Interpolation NEEDED here.")
        lower, upper = self.table.bounding_pair(year)
        request = InterpolationRequest(target_year=year, lower=lower, upper=upper)
        return PopulationEstimate(year=year, population=request.estimate(), exact=False)

    def query(self, token: str) -> PopulationEstimate:
        """Parse, validate and answer a raw year token"""
        return self.estimate(self.parse_year(token))
