"""
Excepciones del sistema de backup

Los errores de volcado (DumpError) son recuperables: se registran y se
continúa con la siguiente base de datos. El resto terminan la ejecución.
"""


class BackupifyError(Exception):
    """Error base del sistema de backup"""


class ConfigError(BackupifyError):
    """No se pudo cargar o decodificar el archivo de configuración"""


class BackupDirectoryError(BackupifyError):
    """No se pudo crear el directorio local de backups"""


class DumpError(BackupifyError):
    """Falló el volcado de una base de datos concreta"""


class NoDumpsError(BackupifyError):
    """Ningún volcado fue exitoso y no se permiten archivos vacíos"""


class ArchiveError(BackupifyError):
    """Falló la creación del archivo comprimido"""


class TransferError(BackupifyError):
    """Falló la subida del archivo al servidor remoto"""


class TransferConnectionError(TransferError):
    """No se pudo conectar con el servidor FTP"""


class TransferAuthError(TransferError):
    """El servidor FTP rechazó las credenciales"""


class TransferFileError(TransferError):
    """No se pudo abrir el archivo local a subir"""


class TransferStoreError(TransferError):
    """El servidor FTP rechazó o interrumpió el almacenamiento del archivo"""
