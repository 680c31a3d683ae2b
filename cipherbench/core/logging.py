import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: str | int = "INFO") -> RichHandler:
    """
    Attach a Rich console handler to the ``cipherbench`` logger.

    Safe to call more than once; the handler is only added the first time
    and later calls just update the level.

    Returns:
        The console handler in use
    """
    logger = logging.getLogger("cipherbench")
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)

    for handler in logger.handlers:
        if isinstance(handler, RichHandler):
            return handler

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        show_time=True,
        rich_tracebacks=True,
        tracebacks_show_locals=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    return handler
