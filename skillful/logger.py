import logging

from rich.console import Console
from rich.logging import RichHandler

from skillful.constants import APP_NAME


def configure_logging(debug: bool = False, console: Console | None = None) -> logging.Logger:
    """Attach a rich handler to the package logger (once) and set its level."""
    logger = logging.getLogger(APP_NAME)
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        handler = RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            rich_tracebacks=debug,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    logger.propagate = False
    return logger
