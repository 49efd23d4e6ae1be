# utils.py - Utilidades gerais do fbrowser
#
# Responsável por:
# - Carregar e salvar configurações do sistema
# - Formatar tamanhos de arquivos para exibição
# - Gerar a chave de ordenação dos nomes (acentos e caixa)
# - Listar os diretórios da raiz até a home (breadcrumb)

import os
import json
import logging
import unicodedata

SETTINGS_FILE = 'config/settings.json'

DEFAULT_SETTINGS = {
    'last_path': '',
    'log_file': 'app.log',
    'log_level': 'INFO',
    'background_scan': False,
}


def load_settings(settings_file=SETTINGS_FILE):
    settings = dict(DEFAULT_SETTINGS)
    if os.path.exists(settings_file):
        try:
            with open(settings_file, 'r', encoding='utf-8') as f:
                settings.update(json.load(f))
        except (OSError, ValueError) as e:
            logging.warning(f"Configurações inválidas em {settings_file}: {e}")
    return settings


def save_settings(settings, settings_file=SETTINGS_FILE):
    settings_dir = os.path.dirname(settings_file)
    if settings_dir:
        os.makedirs(settings_dir, exist_ok=True)
    with open(settings_file, 'w', encoding='utf-8') as f:
        json.dump(settings, f, indent=4)


def format_size(size_in_bytes):
    kb = size_in_bytes // 1024
    if kb < 1:
        return f"{size_in_bytes} bytes"
    elif kb < 1024:
        return f"{kb} kb"
    return f"{kb // 1024}mb"


def normalize_text(text):
    if not text:
        return ""
    return ''.join(
        c for c in unicodedata.normalize('NFD', text.lower())
        if unicodedata.category(c) != 'Mn'
    )


def collation_key(name):
    # acentos e caixa ignorados primeiro; empate: minúsculas antes de maiúsculas
    return normalize_text(name), name.swapcase()


def paths_to_home(home=None):
    path_to_home = os.path.expanduser('~') if home is None else home

    if not path_to_home or not os.path.isdir(path_to_home):
        logging.warning(f"Home vazia ou inexistente: {path_to_home!r}")
        path_to_home = os.sep
    elif not os.access(path_to_home, os.R_OK):
        logging.warning(f"Home sem permissão de leitura: {path_to_home}")
        path_to_home = os.sep

    current = os.path.normpath(os.path.abspath(path_to_home))
    paths = [current]
    parent = os.path.dirname(current)
    while parent != current:
        paths.append(parent)
        current, parent = parent, os.path.dirname(parent)

    paths.reverse()
    logging.debug(f"Caminhos até a home: {paths}")
    return paths
