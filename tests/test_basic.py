"""Basic unit tests for infinite-grid modules."""

import logging


class TestSettingsInitialization:
    """Test settings initialization and basic operations."""

    def test_app_settings_init(self, qsettings) -> None:
        """Test AppSettings can be initialized."""
        from infinite_grid.settings import AppSettings

        settings_obj = AppSettings(storage=qsettings)
        assert settings_obj is not None
        assert settings_obj.get_settings_file_path().endswith("infinite_grid.ini")

    def test_app_settings_validation(self, app_settings) -> None:
        """Test settings validation returns result."""
        validation = app_settings.validate()
        assert validation is not None
        assert validation.is_valid
        assert validation.errors == []


class TestPackageExports:
    """Test the public API is importable from the package root."""

    def test_engine_exports(self) -> None:
        """Test core engine classes are exported."""
        import infinite_grid

        assert infinite_grid.GridConfig().tile_count == 150
        assert callable(infinite_grid.wrap(10))
        assert infinite_grid.__version__


class TestUtilsLogging:
    """Test logging configuration."""

    def test_logging_setup_with_settings(self, app_settings) -> None:
        """Test logging setup works with settings."""
        from infinite_grid.utils.logging_config import setup_logging

        app_settings.file_logging = False
        setup_logging(settings=app_settings)

        logger = logging.getLogger("infinite_grid")
        assert logger.level == logging.DEBUG
        assert logging.getLogger().level == logging.DEBUG

    def test_logging_setup_applies_engine_level(self, app_settings) -> None:
        """Test the engine logger gets its own level and the console handler its threshold."""
        from infinite_grid.utils.logging_config import setup_logging

        app_settings.logging.engine_log_level = "WARNING"
        app_settings.console_log_level = "ERROR"
        app_settings.file_logging = False
        setup_logging(settings=app_settings)

        assert logging.getLogger("infinite_grid.engine").level == logging.WARNING
        assert not logging.getLogger("infinite_grid.engine.tracker").isEnabledFor(logging.DEBUG)
        assert [handler.level for handler in logging.getLogger().handlers] == [logging.ERROR]

    def test_logging_setup_writes_csv_file(self, app_settings, tmp_path, monkeypatch) -> None:
        """Test file logging creates the CSV log below the working directory."""
        from infinite_grid.utils.logging_config import setup_logging

        monkeypatch.chdir(tmp_path)
        app_settings.file_logging = True
        setup_logging(settings=app_settings)
        for handler in logging.getLogger().handlers:
            handler.flush()

        log_file = tmp_path / "logs" / "infinite_grid.csv"
        assert log_file.exists()
        assert '"Logging initialized"' in log_file.read_text(encoding="utf-8")

        for handler in logging.getLogger().handlers:
            handler.close()
        logging.getLogger().handlers.clear()

    def test_colored_formatter_marks_level(self) -> None:
        """Test console formatter wraps the level name in color codes."""
        from infinite_grid.utils.logging_config import ColoredFormatter

        formatter = ColoredFormatter(fmt="%(levelname)s : %(message)s")
        record = logging.LogRecord("infinite_grid", logging.WARNING, __file__, 1, "WARNING here", None, None)
        formatted = formatter.format(record)
        assert formatted.startswith("\033[33mWARNING\033[0m")
        assert formatted.endswith("WARNING here")

    def test_csv_formatter_escapes_quotes(self) -> None:
        """Test file formatter produces a quoted, escaped CSV line."""
        from infinite_grid.utils.logging_config import CSVFormatter

        formatter = CSVFormatter(datefmt="%Y-%m-%d %H:%M:%S")
        record = logging.LogRecord("infinite_grid.engine", logging.INFO, __file__, 42, 'say "hi"', None, None)
        line = formatter.format(record)
        assert line.endswith('"infinite_grid.engine";"42";"say ""hi"""')
        assert line.count(";") == 5
