"""
Servicio principal que orquesta los backups
"""
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional
from ..errors import BackupDirectoryError, NoDumpsError
from ..logger import LoggerService
from ..models import BackupConfig, DumpResult, RunSummary
from ..strategies.base_strategy import DumpStrategy
from ..strategies.mysql_strategy import MySQLDumpStrategy
from .archive_service import ArchiveService, archive_name
from .transfer_service import TransferService


class BackupService:
    """Servicio principal que orquesta los backups"""

    def __init__(
        self,
        config: BackupConfig,
        strategy: Optional[DumpStrategy] = None,
        archive_service: Optional[ArchiveService] = None,
        transfer_service: Optional[TransferService] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """
        Inicializa el servicio de backup

        Args:
            config: Configuración cargada
            strategy: Estrategia de volcado (por defecto mysqldump)
            archive_service: Servicio de archivado
            transfer_service: Servicio de subida
            clock: Reloj usado para el nombre del archivo
        """
        self.config = config
        self.logger = LoggerService.get_logger("BackupService")
        self.strategy = strategy or MySQLDumpStrategy()
        self.archive_service = archive_service or ArchiveService()
        self.transfer_service = transfer_service or TransferService(config)
        self.clock = clock

    def run(self) -> RunSummary:
        """
        Ejecuta el backup completo: directorio, volcados, archivo y subida

        Returns:
            Resumen de la ejecución

        Raises:
            BackupDirectoryError: si no se puede crear el directorio de backups
            NoDumpsError: si no hubo volcados y no se permiten archivos vacíos
            ArchiveError: si falla la creación del archivo
            TransferError: si falla la subida
        """
        self.logger.info("=" * 70)
        self.logger.info("INICIANDO PROCESO DE BACKUP")
        self.logger.info("=" * 70)

        summary = RunSummary()
        self.ensure_backup_directory()

        summary.results = self.dump_all_databases()
        dumped_files = summary.dumped_files

        if not dumped_files:
            if not self.config.allow_empty_archive:
                raise NoDumpsError(
                    f"ningún volcado exitoso de {len(self.config.databases)} base(s) de datos configurada(s)"
                )
            self.logger.warning("Ningún volcado exitoso: se creará un archivo vacío")

        archive_path = self.config.backup_dir / archive_name(self.clock())
        summary.archive_path = self.archive_service.create_archive(dumped_files, archive_path)
        summary.remote_path = self.transfer_service.upload(summary.archive_path)

        self._print_summary(summary)
        return summary

    def ensure_backup_directory(self) -> Path:
        """
        Crea el directorio de backups y sus padres si no existen

        Returns:
            Ruta del directorio

        Raises:
            BackupDirectoryError: si no está configurado o no se puede crear
        """
        if not self.config.backup_directory:
            raise BackupDirectoryError("no se pudo crear el directorio de backups: ruta vacía en la configuración")

        backup_dir = self.config.backup_dir
        try:
            backup_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise BackupDirectoryError(
                f"no se pudo crear el directorio de backups {backup_dir}: {e}"
            ) from e
        return backup_dir

    def dump_all_databases(self) -> List[DumpResult]:
        """
        Vuelca cada base de datos configurada, una tras otra

        Un fallo se registra y se continúa con la siguiente.

        Returns:
            Lista de resultados en el orden configurado
        """
        results = []

        for database in self.config.databases:
            self.logger.info("-" * 70)
            output_file = self.config.dump_file_for(database)
            results.append(self.strategy.execute_dump(self.config, database, output_file))

        return results

    def _print_summary(self, summary: RunSummary):
        """
        Imprime resumen de la operación de backup

        Args:
            summary: Resumen de la ejecución
        """
        results = summary.results
        success_count = len(results) - len(summary.failed)
        total_time = sum(r.duration_seconds for r in results)

        self.logger.info("=" * 70)
        self.logger.info("RESUMEN DEL PROCESO DE BACKUP")
        self.logger.info("=" * 70)

        for result in results:
            status = "✓ EXITOSO" if result.success else "✗ FALLIDO"
            self.logger.info(f"{status}: {result.database_name} ({result.duration_seconds:.2f}s)")
            if not result.success:
                self.logger.error(f"  Error: {result.error}")

        self.logger.info("-" * 70)
        self.logger.info(f"Total de bases de datos procesadas: {len(results)}")
        self.logger.info(f"Backups exitosos: {success_count}")
        self.logger.info(f"Backups fallidos: {len(summary.failed)}")
        self.logger.info(f"Tiempo total de volcado: {total_time:.2f}s")
        self.logger.info(f"Archivo: {summary.archive_path}")
        self.logger.info(f"Subido a: {summary.remote_path}")
        self.logger.info("=" * 70)

        if summary.failed:
            self.logger.warning(
                f"ATENCIÓN: {len(summary.failed)} backup(s) fallaron. "
                "Revisa los errores arriba."
            )
