"""
Servicio de subida del archivo de backup por FTP
"""
import ftplib
import posixpath
from pathlib import Path
from typing import Callable, Tuple
from ..config import Config
from ..errors import (
    TransferAuthError,
    TransferConnectionError,
    TransferFileError,
    TransferStoreError,
)
from ..logger import LoggerService
from ..models import BackupConfig


def parse_address(address: str) -> Tuple[str, int]:
    """
    Separa host y puerto de una dirección tipo host:puerto

    Args:
        address: Dirección del servidor (el puerto es opcional)

    Returns:
        Tupla (host, puerto)
    """
    host, sep, port = address.rpartition(':')
    if sep and port.isdigit() and host and not host.endswith(':'):
        return host.strip('[]'), int(port)
    return address.strip('[]'), Config.FTP_DEFAULT_PORT


class TransferService:
    """Servicio para subir el archivo de backup a un servidor FTP"""

    def __init__(self, config: BackupConfig, ftp_factory: Callable[[], ftplib.FTP] = ftplib.FTP):
        """
        Inicializa el servicio de transferencia

        Args:
            config: Configuración cargada (host, usuario, contraseña y directorio FTP)
            ftp_factory: Constructor del cliente FTP
        """
        self.config = config
        self.ftp_factory = ftp_factory
        self.logger = LoggerService.get_logger("TransferService")

    def remote_path_for(self, local_file: Path) -> str:
        """Ruta remota: directorio FTP + nombre base del archivo local"""
        return posixpath.join(self.config.ftp_directory, Path(local_file).name)

    def upload(self, local_file: Path) -> str:
        """
        Sube un archivo al directorio FTP configurado

        La sesión de control se cierra siempre, una sola vez, tanto si la
        subida termina bien como si falla.

        Args:
            local_file: Archivo a subir

        Returns:
            Ruta remota donde quedó el archivo

        Raises:
            TransferConnectionError: fallo de conexión
            TransferAuthError: fallo de autenticación
            TransferFileError: no se pudo abrir el archivo local
            TransferStoreError: el servidor rechazó el STOR
        """
        local_file = Path(local_file)
        host, port = parse_address(self.config.ftp_host)
        remote_path = self.remote_path_for(local_file)

        self.logger.info(f"Subiendo {local_file} -> ftp://{host}:{port}/{remote_path.lstrip('/')}")

        ftp = self.ftp_factory()
        try:
            try:
                ftp.connect(host, port)
            except ftplib.all_errors as e:
                raise TransferConnectionError(
                    f"no se pudo conectar al servidor FTP {host}:{port}: {e}"
                ) from e

            try:
                ftp.login(self.config.ftp_user, self.config.ftp_password)
            except ftplib.all_errors as e:
                raise TransferAuthError(
                    f"no se pudo autenticar en el servidor FTP como '{self.config.ftp_user}': {e}"
                ) from e

            try:
                fh = open(local_file, 'rb')
            except OSError as e:
                raise TransferFileError(f"no se pudo abrir el archivo local {local_file}: {e}") from e

            with fh:
                try:
                    ftp.storbinary(f"STOR {remote_path}", fh)
                except ftplib.all_errors + (ValueError,) as e:
                    raise TransferStoreError(f"no se pudo subir {local_file.name} a {remote_path}: {e}") from e
        finally:
            self._close(ftp)

        self.logger.info(f"Archivo subido: {remote_path}")
        return remote_path

    def _close(self, ftp: ftplib.FTP):
        """Cierra la sesión: QUIT y, si el servidor no responde, cierre directo"""
        try:
            ftp.quit()
        except ftplib.all_errors + (AttributeError,) as e:
            self.logger.debug(f"QUIT falló, cerrando conexión: {e}")
            ftp.close()
