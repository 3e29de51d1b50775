import logging
import os

from .errors import NoStoreFound

logger = logging.getLogger(__name__)


def resolve_store_path(cli_path: str | None, default: str) -> str:
    # Priority: CLI arg > env var > default (only if it exists)
    path = cli_path
    if path is None:
        path = os.getenv("PWFILE") or None
    if path is None:
        if not os.path.isfile(default):
            raise NoStoreFound(default)
        path = default
    logger.info("Found password file at %s", path)
    return path
