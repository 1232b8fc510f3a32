import logging

import pytest

from bladealign.logging_config import setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger("bladealign")
    yield logger
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


class TestSetupLogging:

    def test_console_and_file_handlers(self, tmp_path, package_logger):
        log_file = tmp_path / "bladealign.log"
        returned = setup_logging(level=logging.DEBUG, log_file=str(log_file))

        assert returned is package_logger
        assert package_logger.level == logging.DEBUG
        assert len(package_logger.handlers) == 2
        logging.getLogger("bladealign.model.belt").debug("belt frame ready")
        for handler in package_logger.handlers:
            handler.flush()
        text = log_file.read_text(encoding="utf-8")
        assert "Logging initialized at level DEBUG." in text
        assert "bladealign.model.belt - DEBUG - belt frame ready" in text

    def test_repeated_setup_does_not_duplicate_handlers(self, package_logger):
        setup_logging()
        setup_logging()
        assert len(package_logger.handlers) == 1

    def test_level_by_name(self, package_logger):
        setup_logging(level="warning")
        assert package_logger.level == logging.WARNING
        assert package_logger.handlers[0].level == logging.WARNING

    def test_unknown_level_name(self, package_logger):
        with pytest.raises(ValueError, match="Unknown logging level"):
            setup_logging(level="chatty")
        assert package_logger.handlers == []
