# app.py - fbrowser
# Ponto de entrada principal do aplicativo.
# Configura o log, abre o diretório inicial e exibe a janela principal.
#
# Uso: python app.py [caminho] [-fullscreen]

import sys
import logging
from PyQt6.QtWidgets import QApplication
from fbrowser.ui.browser_window import BrowserWindow
from fbrowser.utils.utils import load_settings


def configure_logging(settings):
    logging.basicConfig(
        level=getattr(logging, str(settings.get('log_level', 'INFO')).upper(), logging.INFO),
        format='[%(asctime)s] %(levelname)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        filename=settings.get('log_file') or None,
        filemode='a'
    )


def main():
    settings = load_settings()
    configure_logging(settings)

    app = QApplication(sys.argv)
    args = app.arguments()[1:]
    paths = [arg for arg in args if not arg.startswith('-')]
    start_path = paths[0] if paths else settings.get('last_path') or None

    window = BrowserWindow(start_path, background_scan=bool(settings.get('background_scan')))
    if '-fullscreen' in args:
        logging.debug("Iniciando em tela cheia")
        window.showFullScreen()
    else:
        logging.debug("Iniciando em modo janela")
        window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
