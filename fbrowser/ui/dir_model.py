'''
 dir_model.py - Modelo de listagem de diretório do fbrowser
 DirModel expõe o conteúdo do diretório atual por linha e por papel (role),
 recarrega a listagem inteira a cada mudança e executa remoção/renomeação.
 Índices de linha só valem até o próximo listingChanged.
'''

import logging
from enum import IntEnum
from types import MappingProxyType

from PyQt6.QtCore import (
    Qt, QAbstractListModel, QByteArray, QModelIndex, QThread, QUrl,
    pyqtProperty, pyqtSignal, pyqtSlot
)

from fbrowser.errors import PathUnavailable, RenameFailed
from fbrowser.services.directory_scan import DirectoryScanWorker, load_directory, sort_entries
from fbrowser.services.file_operations import remove_files, rename_entry
from fbrowser.utils.utils import format_size

IMAGE_EXTENSIONS = ('.jpg', '.png')
DIRECTORY_ICON = 'image://theme/icon-m-common-directory'
DOCUMENT_ICON = 'image://theme/icon-m-content-document'

_USER_ROLE = Qt.ItemDataRole.UserRole.value
_DISPLAY_ROLE = Qt.ItemDataRole.DisplayRole.value


class Roles(IntEnum):
    FileNameRole = _USER_ROLE
    CreationDateRole = _USER_ROLE + 1
    ModifiedDateRole = _USER_ROLE + 2
    FileSizeRole = _USER_ROLE + 3
    IconSourceRole = _USER_ROLE + 4
    FilePathRole = _USER_ROLE + 5
    IsDirRole = _USER_ROLE + 6
    IsFileRole = _USER_ROLE + 7


ROLE_NAMES = MappingProxyType({
    Roles.FileNameRole: 'fileName',
    Roles.CreationDateRole: 'creationDate',
    Roles.ModifiedDateRole: 'modifiedDate',
    Roles.FileSizeRole: 'fileSize',
    Roles.IconSourceRole: 'iconSource',
    Roles.FilePathRole: 'filePath',
    Roles.IsDirRole: 'isDir',
    Roles.IsFileRole: 'isFile',
})

ROLE_KEYS = MappingProxyType({key: role for role, key in ROLE_NAMES.items()})

# todos os papéis cobertos, um nome por papel
if set(ROLE_NAMES) != set(Roles) or len(ROLE_KEYS) != len(Roles):
    raise RuntimeError("Mapa de papéis incompleto ou com nomes repetidos")


def _role_value(role):
    return getattr(role, 'value', role)


def icon_source(entry):
    if entry.name.lower().endswith(IMAGE_EXTENSIONS):
        return QUrl.fromLocalFile(entry.file_path)
    if entry.is_dir:
        return DIRECTORY_ICON
    return DOCUMENT_ICON


class DirModel(QAbstractListModel):
    pathChanged = pyqtSignal()
    listingChanged = pyqtSignal()
    loadingChanged = pyqtSignal()
    loadFailed = pyqtSignal(str, str)
    removalFailed = pyqtSignal(str, str)
    renameFailed = pyqtSignal(str, str)

    def __init__(self, parent=None, collator=None):
        super().__init__(parent)
        self._path = ''
        self._entries = []
        self._collator = collator
        self._last_error = ''
        self._loading = False

        self._scan_thread = None
        self._scan_worker = None
        self._scan_generation = 0
        self._pending_entries = []

    # leitura

    def rowCount(self, parent=QModelIndex()):
        if parent.isValid():
            return 0
        return len(self._entries)

    def roleNames(self):
        roles = super().roleNames()
        for role, key in ROLE_NAMES.items():
            roles[int(role)] = QByteArray(key.encode())
        return roles

    def data(self, index, role=Qt.ItemDataRole.DisplayRole):
        if not index.isValid() or index.column() != 0:
            return None
        if not (0 <= index.row() < len(self._entries)):
            return None

        role = _role_value(role)
        entry = self._entries[index.row()]
        if role == _DISPLAY_ROLE:
            return entry.name
        if role < _USER_ROLE:
            return None
        try:
            role = Roles(role)
        except ValueError:
            logging.warning(f"Papel fora do intervalo: {role}")
            return None
        return self._project(entry, role)

    @pyqtSlot(int, str, result='QVariant')
    def field(self, row, role_key):
        role = ROLE_KEYS.get(role_key)
        if role is None:
            logging.debug(f"Papel desconhecido: {role_key!r}")
            return None
        if not (0 <= row < len(self._entries)):
            return None
        return self._project(self._entries[row], role)

    def entryAt(self, row):
        if 0 <= row < len(self._entries):
            return self._entries[row]
        return None

    def _project(self, entry, role):
        if role == Roles.FileNameRole:
            return entry.name
        elif role == Roles.CreationDateRole:
            return entry.created_at
        elif role == Roles.ModifiedDateRole:
            return entry.modified_at
        elif role == Roles.FileSizeRole:
            return format_size(entry.size_bytes)
        elif role == Roles.IconSourceRole:
            return icon_source(entry)
        elif role == Roles.FilePathRole:
            return entry.file_path
        elif role == Roles.IsDirRole:
            return entry.is_dir
        elif role == Roles.IsFileRole:
            return not entry.is_dir
        return None

    # caminho atual

    def currentPath(self):
        return self._path

    def load(self, path_name):
        """Carrega path_name; em caso de falha emite loadFailed e levanta PathUnavailable."""
        logging.debug(f"Alterando para {path_name}")
        self._cancel_scan()
        try:
            directory, entries = load_directory(path_name, self._collator)
        except PathUnavailable as e:
            self._report_load_failure(path_name, e.reason)
            raise
        self._commit(directory, entries)

    @pyqtSlot(str, result=bool)
    def setPath(self, path_name):
        # chamado pelo Qt: a falha vai para loadFailed e a listagem anterior fica
        try:
            self.load(path_name)
        except PathUnavailable:
            return False
        return True

    path = pyqtProperty(str, fget=currentPath, fset=setPath, notify=pathChanged)

    @pyqtSlot(result=bool)
    def refresh(self):
        if not self._path:
            logging.debug("Nenhum caminho definido; nada para atualizar")
            return False
        return self.setPath(self._path)

    def _commit(self, directory, entries):
        path_changed = directory != self._path

        self.beginResetModel()
        self._path = directory
        self._entries = entries
        self.endResetModel()

        if path_changed:
            self.pathChanged.emit()

        logging.debug(f"Listagem de {directory}: {len(entries)} itens")
        if logging.getLogger().isEnabledFor(logging.DEBUG):
            for entry in entries:
                logging.debug(f"  {entry.name}")

        self.listingChanged.emit()

    def _report_load_failure(self, path_name, reason):
        logging.error(f"Não foi possível abrir {path_name}: {reason}")
        self._last_error = reason
        self.loadFailed.emit(path_name, reason)

    # comandos

    @pyqtSlot(list)
    def remove(self, paths):
        failures = remove_files(paths)
        for failure in failures:
            self.removalFailed.emit(failure.path, failure.reason)
        if failures:
            self._last_error = failures[-1].reason

        # TODO: remover só as linhas afetadas em vez de recarregar tudo
        self.refresh()
        return failures

    @pyqtSlot(int, str, result=bool)
    def rename(self, row, new_name):
        logging.debug(f"Renomeando linha {row} para {new_name}")
        entry = self.entryAt(row)
        if entry is None:
            logging.warning(f"Acesso fora dos limites: linha {row}")
            return False

        try:
            rename_entry(entry, new_name)
        except RenameFailed as e:
            logging.warning(f"Falha ao renomear {e.path}: {e.reason}")
            self._last_error = e.reason
            self.renameFailed.emit(e.path, e.reason)
            return False

        self.refresh()
        return True

    @pyqtSlot(result=str)
    def lastError(self):
        return self._last_error

    # escaneamento em segundo plano

    def isLoading(self):
        return self._loading

    loading = pyqtProperty(bool, fget=isLoading, notify=loadingChanged)

    def _set_loading(self, loading):
        if self._loading != loading:
            self._loading = loading
            self.loadingChanged.emit()

    @pyqtSlot(str)
    def setPathAsync(self, path_name):
        logging.debug(f"Alterando para {path_name} (segundo plano)")
        self._cancel_scan()

        thread = QThread()
        worker = DirectoryScanWorker(path_name, self._scan_generation)
        worker.moveToThread(thread)
        thread.started.connect(worker.run)
        worker.entriesFound.connect(self._stage_entries)
        worker.scanFinished.connect(self._finish_scan)
        worker.scanFailed.connect(self._fail_scan)

        self._scan_thread = thread
        self._scan_worker = worker
        self._set_loading(True)
        thread.start()

    @pyqtSlot()
    def cancelScan(self):
        self._cancel_scan()

    def _cancel_scan(self):
        # resultados de escaneamentos anteriores passam a ser ignorados
        self._scan_generation += 1
        self._pending_entries = []
        self._release_scan()
        self._set_loading(False)

    def _release_scan(self):
        if self._scan_thread is None:
            return
        self._scan_worker.stop()
        self._scan_thread.quit()
        self._scan_thread.wait()
        self._scan_thread = None
        self._scan_worker = None

    @pyqtSlot(int, list)
    def _stage_entries(self, generation, entries):
        if generation == self._scan_generation:
            self._pending_entries.extend(entries)

    @pyqtSlot(int, str)
    def _finish_scan(self, generation, directory):
        if generation != self._scan_generation:
            return
        entries = sort_entries(self._pending_entries, self._collator)
        self._pending_entries = []
        self._release_scan()
        self._set_loading(False)
        self._commit(directory, entries)

    @pyqtSlot(int, str, str)
    def _fail_scan(self, generation, path_name, reason):
        if generation != self._scan_generation:
            return
        self._pending_entries = []
        self._release_scan()
        self._set_loading(False)
        self._report_load_failure(path_name, reason)
