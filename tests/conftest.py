import logging
import logging.handlers

import pytest


@pytest.fixture
def fasta(tmp_path):
    """Escreve um FASTA temporário e devolve o caminho."""
    def _write(text, name="input.fa"):
        path = tmp_path / name
        if isinstance(text, bytes):
            path.write_bytes(text)
        else:
            path.write_text(text)
        return path
    return _write


@pytest.fixture(autouse=True)
def _reset_root_logger():
    # main() chama log.setup(), que troca os handlers do root
    root = logging.getLogger()
    level = root.level
    yield
    for h in root.handlers[:]:
        if type(h) in (logging.StreamHandler, logging.handlers.RotatingFileHandler):
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
