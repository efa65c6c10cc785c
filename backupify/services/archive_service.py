"""
Servicio para empaquetar los volcados en un .tar.gz (Single Responsibility)
"""
import gzip
import tarfile
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional
from ..config import Config
from ..errors import ArchiveError
from ..logger import LoggerService


def archive_name(moment: Optional[datetime] = None) -> str:
    """
    Nombre del archivo de una ejecución, con resolución de segundos

    Args:
        moment: Instante de la ejecución (por defecto, ahora)

    Returns:
        Nombre tipo backup_20240131_235959.tar.gz
    """
    moment = moment or datetime.now()
    return f"{Config.ARCHIVE_PREFIX}{moment.strftime(Config.TIMESTAMP_FORMAT)}{Config.ARCHIVE_EXTENSION}"


class ArchiveService:
    """Servicio para crear el archivo comprimido de una ejecución"""

    def __init__(self):
        """Inicializa el servicio de archivado"""
        self.logger = LoggerService.get_logger("ArchiveService")

    def create_archive(self, files: Iterable[Path], archive_path: Path) -> Path:
        """
        Crea un .tar.gz con los archivos dados, en el orden recibido

        Las entradas usan solo el nombre base del archivo (sin directorios).
        Una lista vacía produce un archivo válido sin entradas. Si algo falla
        el archivo parcial se deja en disco.

        Args:
            files: Rutas de los volcados a incluir
            archive_path: Ruta del archivo a crear

        Returns:
            Ruta del archivo creado

        Raises:
            ArchiveError: ante cualquier error de E/S, indicando el archivo
        """
        archive_path = Path(archive_path)
        self.logger.info(f"Creando archivo -> {archive_path}")

        try:
            raw = open(archive_path, 'wb')
        except OSError as e:
            raise ArchiveError(f"no se pudo crear el archivo {archive_path}: {e}") from e

        count = 0
        try:
            # Se cierran en orden inverso: tar, gzip y por último el archivo
            with raw, \
                    gzip.GzipFile(filename='', mode='wb', fileobj=raw) as compressor, \
                    tarfile.open(fileobj=compressor, mode='w', format=tarfile.PAX_FORMAT) as tar:
                for file in files:
                    self._add_file(tar, Path(file))
                    count += 1
        except OSError as e:
            raise ArchiveError(f"no se pudo finalizar el archivo {archive_path}: {e}") from e

        size_mb = archive_path.stat().st_size / (1024 * 1024)
        self.logger.info(f"Archivo creado: {archive_path.name} ({count} archivo(s), {size_mb:.2f} MB)")
        return archive_path

    def _add_file(self, tar: tarfile.TarFile, file: Path):
        """
        Añade un archivo regular al tar con su nombre base

        Args:
            tar: Contenedor abierto para escritura
            file: Archivo a añadir
        """
        try:
            info = tar.gettarinfo(str(file), arcname=file.name)
        except OSError as e:
            raise ArchiveError(f"no se pudo obtener información de {file}: {e}") from e

        if not info.isreg():
            raise ArchiveError(f"{file} no es un archivo regular")

        try:
            with open(file, 'rb') as content:
                tar.addfile(info, content)
        except OSError as e:
            raise ArchiveError(f"no se pudo escribir {file} en el archivo: {e}") from e

        self.logger.debug(f"Añadido al archivo: {file.name} ({info.size} bytes)")
