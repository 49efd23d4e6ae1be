'''
Visualizador da lista de diretório com menu de contexto (abrir, renomear, excluir, atualizar).
'''

from PyQt6.QtWidgets import QListView, QMenu, QAbstractItemView
from PyQt6.QtCore import Qt, pyqtSignal


class DirectoryListView(QListView):
    entryActivated = pyqtSignal(int)
    renameRequested = pyqtSignal(int)
    removeRequested = pyqtSignal(list)
    refreshRequested = pyqtSignal()
    parentRequested = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setSelectionMode(QAbstractItemView.SelectionMode.ExtendedSelection)
        self.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.setContextMenuPolicy(Qt.ContextMenuPolicy.CustomContextMenu)
        self.customContextMenuRequested.connect(self.show_context_menu)
        self.activated.connect(lambda index: self.entryActivated.emit(index.row()))

    def selected_rows(self):
        return sorted({index.row() for index in self.selectedIndexes()})

    def show_context_menu(self, position):
        index = self.indexAt(position)
        rows = self.selected_rows()
        if index.isValid() and index.row() not in rows:
            self.setCurrentIndex(index)
            rows = [index.row()]

        menu = QMenu(self)
        open_action = menu.addAction("Abrir")
        rename_action = menu.addAction("Renomear...")
        remove_action = menu.addAction("Excluir")
        menu.addSeparator()
        refresh_action = menu.addAction("Atualizar")

        has_selection = bool(rows)
        open_action.setEnabled(len(rows) == 1)
        rename_action.setEnabled(len(rows) == 1)
        remove_action.setEnabled(has_selection)

        action = menu.exec(self.viewport().mapToGlobal(position))
        if action == open_action:
            self.entryActivated.emit(rows[0])
        elif action == rename_action:
            self.renameRequested.emit(rows[0])
        elif action == remove_action:
            self.removeRequested.emit(rows)
        elif action == refresh_action:
            self.refreshRequested.emit()

    def keyPressEvent(self, event):
        if event.key() == Qt.Key.Key_Backspace:
            self.parentRequested.emit()
        elif event.key() == Qt.Key.Key_F5:
            self.refreshRequested.emit()
        elif event.key() == Qt.Key.Key_F2:
            rows = self.selected_rows()
            if len(rows) == 1:
                self.renameRequested.emit(rows[0])
        elif event.key() == Qt.Key.Key_Delete:
            rows = self.selected_rows()
            if rows:
                self.removeRequested.emit(rows)
        else:
            super().keyPressEvent(event)
