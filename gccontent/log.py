import logging
import logging.handlers
from pathlib import Path

from rich.console import Console


def setup(level: str = "INFO", log_file: Path | None = None) -> Console:
    console = Console(stderr=True)
    lvl     = getattr(logging, level.upper(), logging.INFO)

    # stderr: stdout fica livre para o relatório
    sh = logging.StreamHandler()
    sh.setLevel(lvl)
    sh.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s",
                                      "%H:%M:%S"))
    handlers = [sh]

    # Handler de arquivo rotativo (opcional)
    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.handlers.RotatingFileHandler(
            log_file, maxBytes=2_000_000, backupCount=3, encoding="utf-8"
        )
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(logging.Formatter(
            "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
            "%Y-%m-%d %H:%M:%S"))
        handlers.append(fh)

    logging.basicConfig(level=min(lvl, logging.DEBUG) if log_file else lvl,
                        handlers=handlers, force=True)
    logging.getLogger("matplotlib").setLevel(logging.WARNING)
    logging.getLogger(__name__).debug("Log level → %s", logging.getLevelName(lvl))
    return console
