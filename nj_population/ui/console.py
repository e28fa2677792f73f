import logging
import sys
from typing import Iterator, Optional, TextIO

from nj_population.models.census import PopulationEstimate
from nj_population.services.population_service import (
    PopulationService,
    InvalidInputError,
    OutOfRangeError
)

logger = logging.getLogger(__name__)

PROMPT = (
    "What year would you like to find or approximate the population of "
    "New Jersey for (>= {earliest} and <= {latest}): "
)
INVALID_INPUT_MESSAGE = "Please enter a valid number for the year (you entered: {token})\n"
OUT_OF_RANGE_MESSAGE = "Please enter a year >= {earliest} and <= {latest} (you entered: {year})\n"
APPROXIMATE_SUFFIX = " (approximately)"


def read_tokens(stream: TextIO) -> Iterator[str]:
    """Yield whitespace-delimited tokens from a stream, one line at a time."""
    for line in stream:
        for token in line.split():
            yield token


def format_estimate(estimate: PopulationEstimate) -> str:
    """Render a query result for the console."""
    suffix = "" if estimate.exact else APPROXIMATE_SUFFIX
    return f"\nYear: {estimate.year}\nPopulation: {estimate.population:.2f}{suffix}\n\n"


class ConsoleUI:
    def __init__(
        self,
        service: PopulationService,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None
    ):
        self.service = service
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def _write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def prompt(self) -> None:
        self._write(PROMPT.format(
            earliest=self.service.EARLIEST_YEAR,
            latest=self.service.LATEST_YEAR
        ))

    def handle(self, token: str) -> None:
        """Answer one token, reporting recoverable input errors to the user."""
        try:
            estimate = self.service.query(token)
        except InvalidInputError as e:
            logger.debug(f"Invalid year input: {e.token!r}")
            self._write(INVALID_INPUT_MESSAGE.format(token=e.token))
            return
        except OutOfRangeError as e:
            logger.debug(f"Year out of range: {e.year}")
            self._write(OUT_OF_RANGE_MESSAGE.format(earliest=e.earliest, latest=e.latest, year=e.year))
            return

        self._write(format_estimate(estimate))

    def run(self) -> None:
        """Prompt for years until the sentinel or end of input."""
        tokens = read_tokens(self.stdin)
        while True:
            self.prompt()
            token = next(tokens, None)
            if token is None:
                logger.debug("End of input reached")
                self._write("\n")
                break
            if self.service.is_sentinel(token):
                logger.debug("Sentinel entered, leaving query loop")
                break
            self.handle(token)
