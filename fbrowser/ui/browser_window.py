'''
 browser_window.py - Janela principal do fbrowser
 Contém BrowserWindow: breadcrumb de caminhos, lista do diretório atual e barra de status.
 Toda alteração passa pelo DirModel; a janela só lê linhas e envia comandos.
'''

import os
import logging

from PyQt6.QtCore import QCollator, QLocale
from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QComboBox, QPushButton,
    QMessageBox, QInputDialog, QLineEdit
)

from fbrowser.ui.dir_model import DirModel
from fbrowser.ui.list_view import DirectoryListView
from fbrowser.utils.utils import load_settings, save_settings, paths_to_home


def locale_collator():
    # no locale C a ordenação padrão (collation_key) é usada
    locale = QLocale()
    if locale.language() == QLocale.Language.C:
        return None
    return QCollator(locale)


class BrowserWindow(QMainWindow):
    def __init__(self, start_path=None, background_scan=False):
        super().__init__()
        self.setWindowTitle("fbrowser")
        self.setMinimumSize(640, 480)
        self.background_scan = background_scan

        self.model = DirModel(self, collator=locale_collator())
        self.model.pathChanged.connect(self.update_breadcrumb)
        self.model.listingChanged.connect(self.update_status)
        self.model.loadingChanged.connect(self.update_status)
        self.model.loadFailed.connect(self.show_load_error)
        self.model.renameFailed.connect(self.show_rename_error)

        self._setup_ui()

        home_paths = paths_to_home()
        self.open_path(start_path or home_paths[-1])

    def _setup_ui(self):
        central = QWidget(self)
        layout = QVBoxLayout(central)

        top_bar = QHBoxLayout()
        self.up_button = QPushButton("Acima")
        self.up_button.clicked.connect(self.go_to_parent_folder)
        top_bar.addWidget(self.up_button)

        self.breadcrumb = QComboBox()
        self.breadcrumb.activated.connect(self._on_breadcrumb_activated)
        top_bar.addWidget(self.breadcrumb, 1)
        layout.addLayout(top_bar)

        self.list_view = DirectoryListView(self)
        self.list_view.setModel(self.model)
        self.list_view.entryActivated.connect(self.on_entry_activated)
        self.list_view.renameRequested.connect(self.rename_row)
        self.list_view.removeRequested.connect(self.remove_rows)
        self.list_view.refreshRequested.connect(self.refresh)
        self.list_view.parentRequested.connect(self.go_to_parent_folder)
        layout.addWidget(self.list_view)

        self.setCentralWidget(central)
        self.status_bar = self.statusBar()

    def open_path(self, path_name):
        if self.background_scan:
            self.model.setPathAsync(path_name)
            return
        # falhas chegam por loadFailed (show_load_error); a listagem anterior é mantida
        self.model.setPath(path_name)

    def refresh(self):
        if self.model.path:
            self.open_path(self.model.path)

    def go_to_parent_folder(self):
        current = self.model.path
        parent = os.path.dirname(current)
        if current and parent != current:
            self.open_path(parent)

    def on_entry_activated(self, row):
        entry = self.model.entryAt(row)
        if entry is not None and entry.is_dir:
            self.open_path(entry.file_path)

    def rename_row(self, row):
        entry = self.model.entryAt(row)
        if entry is None:
            return
        new_name, ok = QInputDialog.getText(
            self, "Renomear", "Novo nome:", QLineEdit.EchoMode.Normal, entry.name)
        if ok and new_name and new_name != entry.name:
            self.model.rename(row, new_name)

    def remove_rows(self, rows):
        entries = [self.model.entryAt(row) for row in rows]
        paths = [entry.file_path for entry in entries if entry is not None]
        if not paths:
            return
        answer = QMessageBox.question(
            self, "Excluir", f"Excluir {len(paths)} item(ns)?")
        if answer != QMessageBox.StandardButton.Yes:
            return
        failures = self.model.remove(paths)
        if failures:
            details = "\n".join(f"{f.path}: {f.reason}" for f in failures)
            QMessageBox.warning(self, "Excluir", f"Alguns itens não foram removidos:\n{details}")

    def update_breadcrumb(self):
        current = self.model.path
        self.breadcrumb.blockSignals(True)
        self.breadcrumb.clear()
        self.breadcrumb.addItems(paths_to_home(current))
        self.breadcrumb.setCurrentIndex(self.breadcrumb.count() - 1)
        self.breadcrumb.blockSignals(False)
        self.setWindowTitle(f"fbrowser - {current}")

    def _on_breadcrumb_activated(self, index):
        path_name = self.breadcrumb.itemText(index)
        if path_name and path_name != self.model.path:
            self.open_path(path_name)

    def update_status(self):
        if self.model.loading:
            self.status_bar.showMessage("Carregando...", 0)
        else:
            self.status_bar.showMessage(f"{self.model.rowCount()} itens", 0)

    def show_load_error(self, path_name, reason):
        QMessageBox.warning(self, "Erro", f"Não foi possível abrir {path_name}:\n{reason}")

    def show_rename_error(self, path_name, reason):
        self.status_bar.showMessage(f"Falha ao renomear {os.path.basename(path_name)}: {reason}", 5000)

    def closeEvent(self, event):
        self.model.cancelScan()
        settings = load_settings()
        settings['last_path'] = self.model.path
        try:
            save_settings(settings)
        except OSError as e:
            logging.warning(f"Não foi possível salvar as configurações: {e}")
        super().closeEvent(event)
