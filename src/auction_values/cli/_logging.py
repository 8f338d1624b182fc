import logging
import sys

_QUIET_LOGGERS = ("markdown_it", "rich", "asyncio")


def configure_logging(*, verbose: bool = False) -> None:
    """Send log records to stderr, INFO by default and DEBUG when verbose."""
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG if verbose else logging.INFO)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)-8s %(name)s: %(message)s", datefmt="%H:%M:%S"))
    root.addHandler(handler)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.NOTSET if verbose else logging.WARNING)
