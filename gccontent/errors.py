class GCContentError(Exception):
    """Erro base do gccontent."""


class InputUnavailable(GCContentError):
    """Arquivo de entrada não pôde ser aberto/lido."""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Couldn't open {path}: {reason}")


class FormatError(GCContentError):
    """Conteúdo não está em FASTA válido."""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Error parsing FASTA file {path}: {reason}")


class InvalidWindowConfiguration(GCContentError, ValueError):
    """Janela/passo incompatíveis com a sequência."""

    def __init__(self, window_size: int, step: int, length: int | None, reason: str):
        self.window_size = window_size
        self.step = step
        self.length = length
        super().__init__(reason)
