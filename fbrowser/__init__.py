"""
Pacote principal do fbrowser

Inclui:
- services: leitura de diretórios e operações no sistema de arquivos
- ui: modelo de listagem (QAbstractListModel) e janela do navegador
- utils: configurações, formatação e helpers diversos
"""

__version__ = "0.1.0"
