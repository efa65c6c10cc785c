"""
Estrategia de volcado para MySQL/MariaDB
"""
from typing import Dict, List, Optional
from .base_strategy import DumpStrategy
from ..models import BackupConfig


class MySQLDumpStrategy(DumpStrategy):
    """Estrategia de volcado para MySQL/MariaDB usando mysqldump"""

    def build_command(self, config: BackupConfig, database: str) -> List[str]:
        """
        Construye el comando mysqldump (estructura + datos a stdout)

        La contraseña no va en la línea de comandos, ver build_env.

        Args:
            config: Configuración cargada
            database: Nombre de la base de datos

        Returns:
            Lista de argumentos para subprocess
        """
        return [
            config.dump_command,
            '-h', config.mysql_host,
            '-u', config.mysql_user,
            database
        ]

    def build_env(self, config: BackupConfig) -> Optional[Dict[str, str]]:
        # mysqldump lee MYSQL_PWD, así la contraseña no aparece en ps
        if not config.mysql_password:
            return None
        return self._inherit_env({'MYSQL_PWD': config.mysql_password})
