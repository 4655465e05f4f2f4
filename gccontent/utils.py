import re
import time
import logging
from contextlib import contextmanager

log = logging.getLogger("utils")


def safe_filename(s: str) -> str:
    """Identificador → nome de arquivo (mantém maiúsculas, . - _)."""
    return re.sub(r"_+", "_", re.sub(r"[^0-9A-Za-z._-]+", "_", s)).strip("_.") or "sequence"


@contextmanager
def timed(msg: str):
    log.info(msg + "…")
    t0 = time.perf_counter()
    try:
        yield
    finally:
        log.info("%s em %.1fs", msg, time.perf_counter() - t0)
