# Pacote utils
#
# Este pacote contém funções utilitárias usadas em todo o fbrowser.
# Exemplos: configurações, formatação de tamanhos, chave de ordenação de nomes, caminhos até a home.

# Módulos deste pacote:
# - utils.py: Funções gerais de utilidade (configuração, formatação, ordenação, breadcrumb).
