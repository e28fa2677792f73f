import io
import logging
from pathlib import Path
import pytest

from nj_population import main as main_module
from nj_population.config import AppConfig, DATA_CONFIG, LOGGING_CONFIG
from nj_population.utils.logger import setup_logger


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep a developer's .env and environment out of the tests"""
    monkeypatch.chdir(tmp_path)
    for name in ("NJ_POPULATION_DATA_FILE", "NJ_POPULATION_LOG_LEVEL", "NJ_POPULATION_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    yield
    for handler in logging.getLogger("nj_population").handlers[:]:
        logging.getLogger("nj_population").removeHandler(handler)
        handler.close()


def test_app_config_defaults():
    config = AppConfig.from_env()
    assert config.data_file == DATA_CONFIG["DATA_FILE"]
    assert config.log_level == "WARNING"
    assert config.log_file is None


def test_app_config_from_env(monkeypatch):
    monkeypatch.setenv("NJ_POPULATION_DATA_FILE", "/tmp/other.dat")
    monkeypatch.setenv("NJ_POPULATION_LOG_LEVEL", "debug")
    monkeypatch.setenv("NJ_POPULATION_LOG_FILE", "logs/nj.log")
    config = AppConfig.from_env()
    assert config.data_file == Path("/tmp/other.dat")
    assert config.log_level == "DEBUG"
    assert config.log_file == "logs/nj.log"


def test_build_config_command_line_overrides(monkeypatch):
    monkeypatch.setenv("NJ_POPULATION_DATA_FILE", "/tmp/other.dat")
    args = main_module.parse_arguments(["--data-file", "mine.dat", "--debug", "--log-file", "run.log"])
    config = main_module.build_config(args)
    assert config.data_file == Path("mine.dat")
    assert config.log_level == "DEBUG"
    assert config.log_file == "run.log"


def test_main_sentinel_exits_zero(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1790\n0\n"))
    assert main_module.main([]) == 0
    captured = capsys.readouterr()
    assert "Population: 184139.00\n" in captured.out
    assert captured.err == ""


def test_main_end_of_input_exits_zero(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main_module.main([]) == 0


def test_main_missing_data_file_exits_nonzero(monkeypatch, capsys, tmp_path):
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n"))
    assert main_module.main(["--data-file", str(tmp_path / "missing.dat")]) == 1
    captured = capsys.readouterr()
    assert "Failed to load census data" in captured.err
    assert captured.out == ""


def test_main_debug_traces_to_stderr(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1795\n0\n"))
    assert main_module.main(["--debug"]) == 0
    captured = capsys.readouterr()
    assert "Interpolation NEEDED here." in captured.err
    assert "Interpolation NEEDED" not in captured.out


def test_main_keyboard_interrupt(monkeypatch):
    def interrupt(self):
        raise KeyboardInterrupt

    monkeypatch.setattr(main_module.ConsoleUI, "run", interrupt)
    assert main_module.main([]) == 130


def test_setup_logger_writes_log_file(tmp_path):
    log_file = tmp_path / "logs" / "nj.log"
    logger = setup_logger("nj_population", level="DEBUG", log_file=str(log_file))
    logger.debug("hello from the test")
    for handler in logger.handlers:
        handler.flush()
    assert "hello from the test" in log_file.read_text()


def test_setup_logger_replaces_handlers():
    setup_logger("nj_population")
    logger = setup_logger("nj_population")
    assert len(logger.handlers) == 1
    assert logger.level == logging.getLevelName(LOGGING_CONFIG["LOG_LEVEL"])


def test_main_unknown_log_level_falls_back(monkeypatch, capsys):
    monkeypatch.setenv("NJ_POPULATION_LOG_LEVEL", "verbose")
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n"))
    assert main_module.main([]) == 0
    assert "Unknown log level 'VERBOSE'" in capsys.readouterr().err
    assert logging.getLogger("nj_population").level == logging.WARNING


def test_setup_logger_accepts_level_alias(capsys):
    logger = setup_logger("nj_population", level="warn")
    assert logger.level == logging.WARNING
    assert "Unknown log level" not in capsys.readouterr().err


def test_main_unwritable_log_file_keeps_running(monkeypatch, capsys, tmp_path):
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("")
    monkeypatch.setattr("sys.stdin", io.StringIO("1790\n0\n"))
    assert main_module.main(["--log-file", str(blocker / "nj.log")]) == 0
    captured = capsys.readouterr()
    assert "Cannot write log file" in captured.err
    assert "Population: 184139.00\n" in captured.out
