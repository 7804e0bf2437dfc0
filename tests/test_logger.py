import logging

from rich.logging import RichHandler

from skillful.logger import configure_logging


def test_configure_logging_installs_single_rich_handler() -> None:
    logger = configure_logging(debug=False)
    configure_logging(debug=False)

    handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
    assert len(handlers) == 1
    assert logger.name == "skillful"
    assert logger.level == logging.WARNING
    assert logger.propagate is False


def test_configure_logging_debug_level() -> None:
    logger = configure_logging(debug=True)

    assert logger.level == logging.DEBUG
    configure_logging(debug=False)
