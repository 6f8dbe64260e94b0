"""
Unit tests for matrixprinter/__init__.py.

Covers version metadata, the public API, logging setup and configuration
loading.
"""

import json
import logging
import logging.handlers
import re
from pathlib import Path
from typing import Iterator
from unittest import mock

import pytest

import matrixprinter


@pytest.fixture
def clean_package_logger() -> Iterator[logging.Logger]:
    """Detach package handlers for the test and restore them afterwards."""
    root_logger = logging.getLogger("matrixprinter")
    saved_handlers = [h for h in root_logger.handlers if not _is_capture_handler(h)]
    saved_level = root_logger.level
    _detach_handlers(root_logger)
    yield root_logger
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        if not _is_capture_handler(handler):
            handler.close()
    for handler in saved_handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(saved_level)


def _is_capture_handler(handler: logging.Handler) -> bool:
    return type(handler).__module__.startswith("_pytest")


def _detach_handlers(logger: logging.Logger) -> None:
    # Log capture re-attaches handlers to non-propagating loggers per test phase.
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)


class TestVersionMetadata:
    """Version metadata and constants."""

    def test_version_format(self) -> None:
        assert re.match(r"^\d+\.\d+\.\d+$", matrixprinter.__version__)

    def test_version_components(self) -> None:
        expected_version = (
            f"{matrixprinter.VERSION_MAJOR}."
            f"{matrixprinter.VERSION_MINOR}."
            f"{matrixprinter.VERSION_PATCH}"
        )
        assert matrixprinter.__version__ == expected_version

    def test_metadata_attributes(self) -> None:
        for value in (
            matrixprinter.__author__,
            matrixprinter.__description__,
            matrixprinter.__license__,
            matrixprinter.__python_requires__,
        ):
            assert isinstance(value, str) and value


class TestPublicAPI:
    """Public API exports."""

    def test_all_exports_exist(self) -> None:
        for name in matrixprinter.__all__:
            assert hasattr(matrixprinter, name), f"'{name}' from __all__ is missing"

    def test_no_duplicate_exports(self) -> None:
        assert len(matrixprinter.__all__) == len(set(matrixprinter.__all__))

    def test_driver_exported(self) -> None:
        assert "ESCPrinter" in matrixprinter.__all__
        assert "CharacterTable" in matrixprinter.__all__
        assert issubclass(matrixprinter.PrinterWriteError, matrixprinter.PrinterError)


class TestLogging:
    """Logging configuration."""

    def test_get_logger_returns_logger(self) -> None:
        assert isinstance(matrixprinter.get_logger("test_module"), logging.Logger)

    def test_get_logger_name_format(self) -> None:
        logger = matrixprinter.get_logger("test_module")
        assert logger.name == "matrixprinter.test_module"

    def test_get_logger_with_qualified_name(self) -> None:
        logger = matrixprinter.get_logger("matrixprinter.escp.printer")
        assert logger.name == "matrixprinter.escp.printer"

    def test_get_logger_with_main(self) -> None:
        assert matrixprinter.get_logger("__main__").name == "matrixprinter.main"

    def test_get_logger_strips_relative_dots(self) -> None:
        assert matrixprinter.get_logger(".escp").name == "matrixprinter.escp"

    def test_logger_is_configured(self) -> None:
        root_logger = logging.getLogger("matrixprinter")
        assert len(root_logger.handlers) >= 1
        assert root_logger.propagate is False

    def test_log_level_from_environment(self, clean_package_logger: logging.Logger) -> None:
        with mock.patch.dict("os.environ", {"ESCP_LOG_LEVEL": "DEBUG"}):
            _detach_handlers(clean_package_logger)
            matrixprinter._setup_logging()
        assert clean_package_logger.level == logging.DEBUG

    def test_invalid_log_level_defaults_to_info(
        self, clean_package_logger: logging.Logger
    ) -> None:
        with mock.patch.dict("os.environ", {"ESCP_LOG_LEVEL": "LOUD"}):
            _detach_handlers(clean_package_logger)
            matrixprinter._setup_logging()
        assert clean_package_logger.level == logging.INFO

    def test_setup_logging_is_idempotent(self, clean_package_logger: logging.Logger) -> None:
        _detach_handlers(clean_package_logger)
        matrixprinter._setup_logging()
        count = len(clean_package_logger.handlers)
        matrixprinter._setup_logging()
        assert len(clean_package_logger.handlers) == count

    def test_file_handler_when_log_dir_set(
        self, clean_package_logger: logging.Logger, tmp_path: Path
    ) -> None:
        log_dir = tmp_path / "logs"
        with mock.patch.dict("os.environ", {"ESCP_LOG_DIR": str(log_dir)}):
            _detach_handlers(clean_package_logger)
            matrixprinter._setup_logging()

        file_handlers = [
            h
            for h in clean_package_logger.handlers
            if isinstance(h, logging.handlers.RotatingFileHandler)
        ]
        assert len(file_handlers) == 1
        assert (log_dir / "matrixprinter.log").exists()

    def test_no_file_handler_without_log_dir(
        self, clean_package_logger: logging.Logger, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("ESCP_LOG_DIR", raising=False)
        _detach_handlers(clean_package_logger)
        matrixprinter._setup_logging()
        assert not any(
            isinstance(h, logging.handlers.RotatingFileHandler)
            for h in clean_package_logger.handlers
        )


class TestConfiguration:
    """Configuration loading."""

    def test_load_config_defaults_when_missing(self, tmp_path: Path) -> None:
        config = matrixprinter.load_config(tmp_path / "nonexistent_config.json")
        assert config == matrixprinter._DEFAULT_CONFIG
        assert config is not matrixprinter._DEFAULT_CONFIG

    def test_load_config_from_file(self, tmp_path: Path) -> None:
        config_path = tmp_path / "printer.json"
        config_path.write_text(
            json.dumps({"printer_target": "/dev/usb/lp0", "printer_24pin": True}),
            encoding="utf-8",
        )

        config = matrixprinter.load_config(config_path)

        assert config["printer_target"] == "/dev/usb/lp0"
        assert config["printer_24pin"] is True
        assert config["default_character_table"] == "BRAZIL"

    def test_load_config_invalid_json(self, tmp_path: Path) -> None:
        config_path = tmp_path / "broken.json"
        config_path.write_text("{ not json", encoding="utf-8")

        config = matrixprinter.load_config(config_path)

        assert config == matrixprinter._DEFAULT_CONFIG

    def test_load_config_non_object(self, tmp_path: Path) -> None:
        config_path = tmp_path / "list.json"
        config_path.write_text("[1, 2, 3]", encoding="utf-8")

        config = matrixprinter.load_config(config_path)

        assert config == matrixprinter._DEFAULT_CONFIG

    def test_load_config_does_not_mutate_defaults(self, tmp_path: Path) -> None:
        config_path = tmp_path / "printer.json"
        config_path.write_text(json.dumps({"printer_target": "LPT1"}), encoding="utf-8")

        matrixprinter.load_config(config_path)

        assert matrixprinter._DEFAULT_CONFIG["printer_target"] is None
