import pandas as pd
import logging
import os
from typing import List, Optional, Union
from pathlib import Path

from nj_population.config import DATA_CONFIG, QUERY_CONFIG
from nj_population.models.census import CensusRecord, CensusTable

logger = logging.getLogger(__name__)

class DataSourceError(Exception):
    """Base exception for DataLoader."""
    pass

class MalformedDataError(DataSourceError):
    """Raised when a line of the data file cannot be parsed."""
    pass

class DataLoader:
    """Service class for loading the decadal census table."""

    # Constants
    DECADES = DATA_CONFIG["DECADES"]
    COLUMNS = DATA_CONFIG["COLUMNS"]

    @staticmethod
    def load_data(path: Optional[Union[str, Path]] = None) -> CensusTable:
        """
        Read the census data file and convert it to a CensusTable.

        Reading stops after DECADES records; any further lines are ignored.

        Args:
            path: Path to the data file, defaults to the bundled table

        Returns:
            CensusTable: Loaded census table

        Raises:
            DataSourceError: If the file is missing, unreadable, short or malformed
        """
        path = Path(path) if path is not None else DATA_CONFIG["DATA_FILE"]

        if not os.path.exists(path):
            raise DataSourceError(f"Data file not found: {path}")

        try:
            df = pd.read_csv(
                path,
                sep=r"\s+",
                header=None,
                dtype=str,
                nrows=DataLoader.DECADES,
                skip_blank_lines=True,
                keep_default_na=False,
                encoding="utf-8"
            )
        except pd.errors.EmptyDataError:
            raise DataSourceError(f"Data file is empty: {path}")
        except pd.errors.ParserError as e:
            raise MalformedDataError(f"Malformed data file {path}: {str(e)}")
        except (OSError, UnicodeDecodeError) as e:
            raise DataSourceError(f"Error reading data file {path}: {str(e)}")

        if df.shape[1] != len(DataLoader.COLUMNS):
            raise MalformedDataError(
                f"Malformed data file {path}: expected {len(DataLoader.COLUMNS)} columns, found {df.shape[1]}"
            )
        df.columns = DataLoader.COLUMNS

        records = DataLoader.parse_records(df, source=str(path))

        if len(records) != DataLoader.DECADES:
            raise DataSourceError(
                f"Expected {DataLoader.DECADES} records in {path}, found {len(records)}"
            )

        logger.info(f"Successfully loaded {len(records)} records from {path}")
        return CensusTable(records, decade_span=QUERY_CONFIG["DECADE_SPAN"])

    @staticmethod
    def parse_records(df: pd.DataFrame, source: str = "<data>") -> List[CensusRecord]:
        """
        Convert raw text columns to census records.

        Args:
            df: DataFrame of string 'year' and 'population' columns
            source: Name used in error messages

        Returns:
            List[CensusRecord]: Records in file order

        Raises:
            MalformedDataError: If any row is not an integer year and a decimal population.
                The error names the record number, counting data rows only;
                blank lines in the file are not counted.
        """
        years = pd.to_numeric(df["year"], errors="coerce")
        populations = pd.to_numeric(df["population"], errors="coerce")

        bad_rows = df.index[years.isna() | populations.isna() | (years % 1 != 0)]
        if len(bad_rows) > 0:
            row = bad_rows[0]
            line = " ".join(str(value) for value in df.loc[row, DataLoader.COLUMNS] if pd.notna(value))
            raise MalformedDataError(f"Malformed data record {row + 1} in {source} (blank lines not counted): {line!r}")

        records = []
        for year, population in zip(years, populations):
            record = CensusRecord(year=int(year), population=float(population))
            logger.debug(f"{record.year} {record.population:f}")
            records.append(record)
        return records
