'''
 file_operations.py - Operações de escrita no sistema de arquivos
 Converte as falhas de os.remove / os.rename em RemovalFailed / RenameFailed.
'''

import os
import logging

from fbrowser.errors import RemovalFailed, RenameFailed


def remove_file(path):
    if os.path.isdir(path) and not os.path.islink(path):
        raise RemovalFailed(path, 'é um diretório')
    try:
        os.remove(path)
    except OSError as e:
        raise RemovalFailed(path, e.strerror or str(e)) from e
    logging.info(f"Removido: {path}")


def remove_files(paths):
    failures = []
    for path in paths:
        try:
            remove_file(path)
        except RemovalFailed as e:
            logging.warning(f"Falha ao remover {path}: {e.reason}")
            failures.append(e)
    return failures


def rename_entry(entry, new_name):
    source = entry.file_path
    if not new_name:
        raise RenameFailed(source, 'nome vazio')

    target = os.path.join(entry.absolute_path, new_name)
    # os.rename sobrescreve o destino em POSIX
    if os.path.lexists(target):
        raise RenameFailed(source, f'{target} já existe')

    try:
        os.rename(source, target)
    except OSError as e:
        raise RenameFailed(source, e.strerror or str(e)) from e

    kind = 'pasta' if entry.is_dir else 'arquivo'
    logging.info(f"Renomeado ({kind}): {source} -> {target}")
    return target
