# Pacote services
# Este pacote contém o acesso ao sistema de arquivos usado pelo modelo de listagem.
#
# Módulos deste pacote:
# - directory_scan.py: Leitura e ordenação do conteúdo de um diretório (síncrona ou em segundo plano).
# - file_operations.py: Remoção e renomeação de arquivos e pastas.
