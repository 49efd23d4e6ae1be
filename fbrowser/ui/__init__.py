# Pacote UI
#
# Este pacote contém o modelo de listagem e os componentes visuais do fbrowser.
#
# Módulos deste pacote:
# - dir_model.py: Modelo de dados (QAbstractListModel) do diretório atual.
# - list_view.py: Visualização da lista com menu de contexto.
# - browser_window.py: Janela principal com breadcrumb e lista.
