import logging
import os
from contextlib import contextmanager
from typing import Iterator, Tuple

from .errors import StoreReadError

logger = logging.getLogger(__name__)

STORE_NAME = ".passfile"


def default_store_path() -> str:
    return os.path.join(os.path.expanduser("~"), STORE_NAME)


def wipe(buf: bytearray):
    buf[:] = bytes(len(buf))


def read_bytes(path: str) -> Tuple[bytearray, int]:
    """Read the whole file into a bytearray; return it with the content length.

    Bytes past the length are zero. Buffers outgrown while reading are
    wiped before being dropped, and so is the current one on failure.
    """
    with open(path, "rb", buffering=0) as fh:
        # One spare byte so a file that grew since fstat is noticed.
        buf = bytearray(os.fstat(fh.fileno()).st_size + 1)
        n = 0
        try:
            while True:
                with memoryview(buf)[n:] as view:
                    got = fh.readinto(view)
                if not got:
                    return buf, n
                n += got
                if n == len(buf):
                    bigger = bytearray(len(buf) * 2)
                    bigger[:n] = buf
                    wipe(buf)
                    buf = bigger
        except BaseException:
            wipe(buf)
            raise


@contextmanager
def open_store(path: str) -> Iterator[str]:
    """Yield the decoded passfile text and zero the raw buffer afterwards.

    The decoded str itself cannot be wiped; keep its lifetime to one command.
    """
    try:
        buf, size = read_bytes(path)
    except OSError as e:
        raise StoreReadError(path, e) from e
    try:
        with memoryview(buf)[:size] as view:
            try:
                text = str(view, "utf-8")
            except UnicodeDecodeError as e:
                raise StoreReadError(path, e) from e
        logger.debug("Read %d bytes from %s", size, path)
        yield text
    finally:
        wipe(buf)
