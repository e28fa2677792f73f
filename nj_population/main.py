import argparse
import sys
from pathlib import Path
from typing import List, Optional
from dotenv import load_dotenv

from nj_population.config import AppConfig
from nj_population.services.data_loader import DataLoader, DataSourceError
from nj_population.services.population_service import PopulationService
from nj_population.ui.console import ConsoleUI
from nj_population.utils.logger import setup_logger


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Find or approximate the population of New Jersey between 1790 and 2010'
    )
    parser.add_argument(
        '--data-file',
        type=str,
        help='Path to the census data file (default: bundled njpopulation.dat)',
        default=None
    )
    parser.add_argument(
        '--debug', '-d',
        action='store_true',
        help='Trace loaded records and interpolation decisions on stderr'
    )
    parser.add_argument(
        '--log-file',
        type=str,
        help='Also write diagnostics to this rotating log file',
        default=None
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> AppConfig:
    """Merge environment settings with command line overrides."""
    config = AppConfig.from_env()
    if args.data_file:
        config.data_file = Path(args.data_file)
    if args.debug:
        config.log_level = "DEBUG"
    if args.log_file:
        config.log_file = args.log_file
    return config


def main(argv: Optional[List[str]] = None) -> int:
    # Load environment variables
    load_dotenv()

    args = parse_arguments(argv)
    config = build_config(args)
    logger = setup_logger("nj_population", level=config.log_level, log_file=config.log_file)

    try:
        table = DataLoader.load_data(config.data_file)
    except DataSourceError as e:
        logger.error(f"Failed to load census data: {str(e)}")
        return 1

    console = ConsoleUI(PopulationService(table))
    try:
        console.run()
    except KeyboardInterrupt:
        logger.debug("Interrupted by user")
        print(file=sys.stderr)
        return 130

    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
