import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger exactly once.

    * Console only (StreamHandler -> stderr)
    * Level from settings, INFO if the name is unknown
    * Leaves existing handlers alone if logging is already configured
    """
    root = logging.getLogger()
    if root.handlers:
        return

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
