# errors.py - Exceções do fbrowser
# Falhas do sistema de arquivos são convertidas nestas classes na fronteira de cada operação.


class BrowserError(Exception):
    def __init__(self, path, reason=''):
        self.path = path
        self.reason = reason
        message = f"{path}: {reason}" if reason else str(path)
        super().__init__(message)


class PathUnavailable(BrowserError):
    """Diretório inexistente ou sem permissão de leitura."""


class RemovalFailed(BrowserError):
    pass


class RenameFailed(BrowserError):
    pass
