"""
Modelos de datos del sistema
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple
from .config import Config


@dataclass(frozen=True)
class BackupConfig:
    """Configuración de una ejecución de backup (inmutable tras la carga)"""
    mysql_host: str = ""
    mysql_user: str = ""
    mysql_password: str = ""
    databases: Tuple[str, ...] = ()
    backup_directory: str = ""
    ftp_host: str = ""
    ftp_user: str = ""
    ftp_password: str = ""
    ftp_directory: str = ""
    dump_command: str = Config.DUMP_COMMAND
    allow_empty_archive: bool = True

    @property
    def backup_dir(self) -> Path:
        """Directorio local de backups"""
        return Path(self.backup_directory)

    def dump_file_for(self, database: str) -> Path:
        """Ruta del volcado de una base de datos"""
        return self.backup_dir / f"{database}{Config.DUMP_EXTENSION}"

    def __repr__(self):
        # Las contraseñas nunca deben terminar en los logs
        return (
            f"BackupConfig(mysql_host={self.mysql_host!r}, mysql_user={self.mysql_user!r}, "
            f"databases={self.databases!r}, backup_directory={self.backup_directory!r}, "
            f"ftp_host={self.ftp_host!r}, ftp_user={self.ftp_user!r}, "
            f"ftp_directory={self.ftp_directory!r})"
        )


@dataclass
class DumpResult:
    """Resultado del volcado de una base de datos"""
    database_name: str
    success: bool
    output_file: Optional[str] = None
    error: Optional[str] = None
    duration_seconds: float = 0.0

    def __str__(self):
        if self.success:
            return f"✓ {self.database_name}: {self.output_file} ({self.duration_seconds:.2f}s)"
        else:
            return f"✗ {self.database_name}: {self.error}"


@dataclass
class RunSummary:
    """Resultado de una ejecución completa"""
    results: List[DumpResult] = field(default_factory=list)
    archive_path: Optional[Path] = None
    remote_path: Optional[str] = None

    @property
    def dumped_files(self) -> List[Path]:
        return [Path(r.output_file) for r in self.results if r.success]

    @property
    def failed(self) -> List[DumpResult]:
        return [r for r in self.results if not r.success]
