"""
Estrategia base para volcados (Strategy Pattern)
"""
from abc import ABC, abstractmethod
import os
import shutil
import subprocess
import time
from pathlib import Path
from typing import Dict, List, Optional
from ..errors import DumpError
from ..logger import LoggerService
from ..models import BackupConfig, DumpResult


class DumpStrategy(ABC):
    """Interfaz abstracta para estrategias de volcado (Open/Closed Principle)"""

    # Líneas finales de stderr que se adjuntan al error
    STDERR_TAIL_LINES = 5

    def __init__(self):
        """Inicializa la estrategia"""
        self.logger = LoggerService.get_logger(self.__class__.__name__)

    @abstractmethod
    def build_command(self, config: BackupConfig, database: str) -> List[str]:
        """
        Construye la línea de comandos de la herramienta de volcado

        Args:
            config: Configuración cargada
            database: Nombre de la base de datos

        Returns:
            Lista de argumentos para subprocess
        """
        pass

    def build_env(self, config: BackupConfig) -> Optional[Dict[str, str]]:
        """Entorno del proceso hijo; None hereda el del proceso actual"""
        return None

    def dump(self, config: BackupConfig, database: str, output_file: Path) -> Path:
        """
        Vuelca una base de datos redirigiendo stdout de la herramienta al archivo

        Args:
            config: Configuración cargada
            database: Nombre de la base de datos
            output_file: Archivo de salida del volcado

        Returns:
            Ruta del archivo generado

        Raises:
            DumpError: si no se puede crear el archivo, lanzar el proceso o
                este termina con código distinto de cero
        """
        cmd = self.build_command(config, database)

        tool_error = self._validate_tools([cmd[0]])
        if tool_error:
            raise DumpError(tool_error)

        try:
            out = open(output_file, 'wb')
        except (OSError, ValueError) as e:
            raise DumpError(f"no se pudo crear el archivo de volcado {output_file}: {e}") from e

        with out:
            try:
                result = subprocess.run(
                    cmd,
                    stdout=out,
                    stderr=subprocess.PIPE,
                    env=self.build_env(config),
                    text=True,
                    errors='replace'
                )
            except (OSError, ValueError) as e:
                raise DumpError(f"no se pudo ejecutar {cmd[0]}: {e}") from e

        if result.returncode != 0:
            message = f"{cmd[0]} terminó con código {result.returncode}"
            stderr_tail = self._tail(result.stderr)
            if stderr_tail:
                message += f": {stderr_tail}"
            raise DumpError(message)

        return output_file

    def execute_dump(self, config: BackupConfig, database: str, output_file: Path) -> DumpResult:
        """
        Template method para ejecutar el volcado con medición de tiempo

        Los errores se devuelven en el resultado, nunca se propagan.

        Args:
            config: Configuración cargada
            database: Nombre de la base de datos
            output_file: Archivo de salida del volcado

        Returns:
            Resultado del volcado
        """
        self.logger.info(f"Creando backup de la base de datos {database} -> {output_file}")
        start_time = time.time()

        try:
            self.dump(config, database, output_file)
        except DumpError as e:
            duration = time.time() - start_time
            self.logger.error(f"Fallo el backup de la base de datos {database}: {e}")
            return DumpResult(
                database_name=database,
                success=False,
                error=str(e),
                duration_seconds=duration
            )

        duration = time.time() - start_time
        file_size = output_file.stat().st_size / (1024 * 1024)  # MB
        self.logger.info(
            f"Backup exitoso: {output_file.name} "
            f"({file_size:.2f} MB, {duration:.2f}s)"
        )
        return DumpResult(
            database_name=database,
            success=True,
            output_file=str(output_file),
            duration_seconds=duration
        )

    def _validate_tools(self, tools: list) -> Optional[str]:
        """
        Valida que las herramientas necesarias estén disponibles

        Args:
            tools: Lista de herramientas requeridas

        Returns:
            None si todo está OK, mensaje de error en caso contrario
        """
        for tool in tools:
            if not shutil.which(tool):
                return f"La herramienta {tool} no está instalada"
        return None

    @classmethod
    def _tail(cls, text: Optional[str]) -> str:
        if not text:
            return ""
        lines = [line.strip() for line in text.strip().splitlines() if line.strip()]
        return " | ".join(lines[-cls.STDERR_TAIL_LINES:])

    @staticmethod
    def _inherit_env(extra: Dict[str, str]) -> Dict[str, str]:
        env = os.environ.copy()
        env.update(extra)
        return env
