"""
Repositorio para manejar configuración (Dependency Inversion)
"""
import json
import os
from pathlib import Path
from typing import Dict, Optional
from ..config import Config
from ..errors import ConfigError
from ..logger import LoggerService
from ..models import BackupConfig


class ConfigRepository:
    """Repositorio para manejar configuración"""

    # Campos de texto del descriptor y si admiten referencias ${VAR}
    _STRING_FIELDS = (
        'mysql_host', 'mysql_user', 'mysql_password', 'backup_directory',
        'ftp_host', 'ftp_user', 'ftp_password', 'ftp_directory', 'dump_command',
    )

    def __init__(self, config_file: Optional[Path] = None):
        """
        Inicializa el repositorio de configuración

        Args:
            config_file: Ruta al archivo de configuración (opcional)
        """
        self.config_file = Path(config_file) if config_file else Config.CONFIG_FILE
        self.logger = LoggerService.get_logger("ConfigRepository")
        self._raw_config = None

    def load(self) -> Dict:
        """
        Carga configuración desde archivo JSON

        Returns:
            Diccionario con la configuración

        Raises:
            ConfigError: si el archivo no existe, no se puede leer o no es JSON válido
        """
        try:
            with open(self.config_file, "r", encoding='utf-8') as f:
                raw = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"config {self.config_file}: JSON inválido: {e}") from e
        except OSError as e:
            raise ConfigError(f"config {self.config_file}: no se pudo leer: {e}") from e

        if not isinstance(raw, dict):
            raise ConfigError(f"config {self.config_file}: se esperaba un objeto JSON")

        self._raw_config = raw
        self.logger.info(f"Configuración cargada exitosamente: {self.config_file}")
        return self._raw_config

    def save(self, config: Dict) -> bool:
        """
        Guarda configuración en archivo JSON

        Args:
            config: Diccionario con la configuración

        Returns:
            True si se guardó exitosamente
        """
        try:
            self.config_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_file, "w", encoding='utf-8') as f:
                json.dump(config, f, indent=4, ensure_ascii=False)
            self.logger.info(f"Configuración guardada exitosamente: {self.config_file}")
            return True
        except OSError as e:
            self.logger.error(f"Error al guardar la configuración: {str(e)}")
            return False

    def get_config(self) -> BackupConfig:
        """
        Decodifica el descriptor en un BackupConfig

        Solo se valida la estructura: los campos ausentes quedan vacíos y los
        desconocidos se ignoran.

        Returns:
            Objeto BackupConfig

        Raises:
            ConfigError: si algún campo tiene un tipo incompatible
        """
        if self._raw_config is None:
            self.load()

        raw = self._raw_config
        values = {}

        for key in self._STRING_FIELDS:
            if key not in raw or raw[key] is None:
                continue
            if not isinstance(raw[key], str):
                raise ConfigError(f"config {self.config_file}: el campo '{key}' debe ser texto")
            values[key] = self._resolve_credential(raw[key])

        databases = raw.get('databases')
        if databases is None:
            databases = []
        if not isinstance(databases, list) or not all(isinstance(db, str) for db in databases):
            raise ConfigError(
                f"config {self.config_file}: el campo 'databases' debe ser una lista de nombres"
            )
        values['databases'] = tuple(databases)

        if 'allow_empty_archive' in raw:
            if not isinstance(raw['allow_empty_archive'], bool):
                raise ConfigError(
                    f"config {self.config_file}: el campo 'allow_empty_archive' debe ser booleano"
                )
            values['allow_empty_archive'] = raw['allow_empty_archive']

        if not values.get('dump_command'):
            values.pop('dump_command', None)

        return BackupConfig(**values)

    def _resolve_credential(self, value: str) -> str:
        """
        Resuelve credencial desde variable de entorno si es necesario

        Args:
            value: Valor que puede contener referencia a variable de entorno

        Returns:
            Valor resuelto
        """
        if value.startswith("${") and value.endswith("}"):
            env_var = value[2:-1]
            resolved = os.getenv(env_var, "")
            if not resolved:
                self.logger.warning(f"Variable de entorno no encontrada: {env_var}")
            return resolved
        return value

    def create_example_config(self) -> bool:
        """
        Crea un archivo de configuración de ejemplo

        Returns:
            True si se creó exitosamente
        """
        return self.save(Config.DEFAULT_CONFIG)
