import pytest

from nj_population.config import DATA_CONFIG
from nj_population.services.data_loader import DataLoader
from nj_population.services.population_service import PopulationService


@pytest.fixture(scope="session")
def census_table():
    """Census table loaded from the bundled data file"""
    return DataLoader.load_data(DATA_CONFIG["DATA_FILE"])


@pytest.fixture
def population_service(census_table):
    return PopulationService(census_table)


@pytest.fixture
def write_data_file(tmp_path):
    """Write lines to a temporary data file and return its path"""
    def _write(lines, name="census.dat"):
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path
    return _write


@pytest.fixture
def decade_lines():
    """Well-formed data file lines for 1790 through 2010"""
    return [f"{1790 + 10 * i} {1000.0 * (i + 1):.1f}" for i in range(23)]
