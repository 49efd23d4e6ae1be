'''
 directory_scan.py - Leitura do conteúdo de um diretório
 Gera os registros DirectoryEntry (um por item visível) já ordenados:
 pastas primeiro, depois arquivos, ambos por nome.
 Inclui DirectoryScanWorker para escanear em segundo plano, em lotes.
'''

import os
import logging
from dataclasses import dataclass
from datetime import datetime
from functools import cmp_to_key

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from fbrowser.errors import PathUnavailable
from fbrowser.utils.utils import collation_key

HIDDEN_PREFIX = '.'
SCAN_BATCH_SIZE = 50


@dataclass(frozen=True)
class DirectoryEntry:
    name: str
    absolute_path: str
    file_path: str
    is_dir: bool
    size_bytes: int
    created_at: datetime
    modified_at: datetime


def canonical_path(path_name):
    return os.path.normpath(os.path.abspath(os.path.expanduser(path_name)))


def is_hidden(name):
    return name.startswith(HIDDEN_PREFIX)


def snapshot_entry(dir_entry, parent_path):
    """Captura os metadados de um os.DirEntry; links quebrados usam lstat."""
    try:
        st = dir_entry.stat()
    except OSError:
        st = dir_entry.stat(follow_symlinks=False)
    try:
        is_dir = dir_entry.is_dir()
    except OSError:
        is_dir = False

    created = getattr(st, 'st_birthtime', st.st_ctime)
    return DirectoryEntry(
        name=dir_entry.name,
        absolute_path=parent_path,
        file_path=os.path.join(parent_path, dir_entry.name),
        is_dir=is_dir,
        size_bytes=0 if is_dir else st.st_size,
        created_at=datetime.fromtimestamp(created),
        modified_at=datetime.fromtimestamp(st.st_mtime),
    )


def _open_directory(path_name):
    directory = canonical_path(path_name)
    if not os.path.isdir(directory):
        raise PathUnavailable(directory, 'não é um diretório acessível')
    try:
        return directory, os.scandir(directory)
    except OSError as e:
        raise PathUnavailable(directory, e.strerror or str(e)) from e


def iter_entries(directory, iterator, should_stop=None):
    with iterator:
        for dir_entry in iterator:
            if should_stop is not None and should_stop():
                return
            if is_hidden(dir_entry.name):
                continue
            try:
                yield snapshot_entry(dir_entry, directory)
            except OSError as e:
                logging.warning(f"Ignorando {dir_entry.path}: {e}")


def sort_entries(entries, collator=None):
    """Pastas antes de arquivos; dentro de cada grupo, nome em ordem crescente.

    Sem collator, usa collation_key (independente do locale do processo).
    Com um QCollator, compara os nomes com ele.
    """
    if collator is None:
        return sorted(entries, key=lambda e: (not e.is_dir, collation_key(e.name)))

    def file_compare(a, b):
        if a.is_dir != b.is_dir:
            return -1 if a.is_dir else 1
        return collator.compare(a.name, b.name)

    return sorted(entries, key=cmp_to_key(file_compare))


def load_directory(path_name, collator=None):
    directory, iterator = _open_directory(path_name)
    try:
        entries = list(iter_entries(directory, iterator))
    except OSError as e:
        raise PathUnavailable(directory, e.strerror or str(e)) from e
    return directory, sort_entries(entries, collator)


class DirectoryScanWorker(QObject):
    entriesFound = pyqtSignal(int, list)
    scanFinished = pyqtSignal(int, str)
    scanFailed = pyqtSignal(int, str, str)

    def __init__(self, path_name, generation=0, batch_size=SCAN_BATCH_SIZE):
        super().__init__()
        self.path_name = path_name
        self.generation = generation
        self.batch_size = batch_size
        self.is_running = True

    @pyqtSlot()
    def run(self):
        logging.debug(f"Escaneamento em segundo plano: {self.path_name}")
        try:
            directory, iterator = _open_directory(self.path_name)
        except PathUnavailable as e:
            logging.error(f"Falha ao abrir {self.path_name}: {e.reason}")
            self.scanFailed.emit(self.generation, self.path_name, e.reason)
            return

        batch = []
        total = 0
        try:
            for entry in iter_entries(directory, iterator, lambda: not self.is_running):
                batch.append(entry)
                if len(batch) >= self.batch_size:
                    self.entriesFound.emit(self.generation, batch)
                    total += len(batch)
                    batch = []
        except OSError as e:
            reason = e.strerror or str(e)
            logging.error(f"Falha ao ler {directory}: {reason}")
            self.scanFailed.emit(self.generation, self.path_name, reason)
            return

        if not self.is_running:
            logging.info(f"Escaneamento cancelado: {directory}")
            return

        if batch:
            self.entriesFound.emit(self.generation, batch)
            total += len(batch)
        logging.debug(f"Escaneamento concluído: {directory} ({total} itens)")
        self.scanFinished.emit(self.generation, directory)

    def stop(self):
        self.is_running = False
