"""
Configuración centralizada del sistema de backup
"""
import logging
import os
from pathlib import Path
from dotenv import load_dotenv, find_dotenv

class Config:
    """Configuración centralizada del sistema"""

    ENV_FILE = find_dotenv(usecwd=True)

    # Cargar variables de entorno (credenciales) desde .env si existe
    load_dotenv(ENV_FILE)

    # BASE_DIR es el directorio desde donde se lanza el job
    BASE_DIR = Path(ENV_FILE).parent if ENV_FILE else Path.cwd()

    # Ruta relativa fija del descriptor de configuración
    CONFIG_FILE = Path("config.json")

    LOG_DIR = Path(os.getenv("BACKUPIFY_LOG_DIR")) if os.getenv("BACKUPIFY_LOG_DIR") else (BASE_DIR / "Logs")

    LOG_LEVEL = getattr(logging, os.getenv("BACKUPIFY_LOG_LEVEL", "INFO").upper(), logging.INFO)
    LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    DUMP_COMMAND = "mysqldump"
    DUMP_EXTENSION = ".sql"

    ARCHIVE_PREFIX = "backup_"
    ARCHIVE_EXTENSION = ".tar.gz"
    TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"

    FTP_DEFAULT_PORT = 21

    DEFAULT_CONFIG = {
        "mysql_host": "localhost",
        "mysql_user": "${DB_USER}",
        "mysql_password": "${DB_PASSWORD}",
        "databases": ["app", "billing"],
        "backup_directory": "Backups",
        "ftp_host": "ftp.example.com:21",
        "ftp_user": "${FTP_USER}",
        "ftp_password": "${FTP_PASSWORD}",
        "ftp_directory": "/backups",
        "allow_empty_archive": True
    }

    ENV_EXAMPLE = """# Variables de entorno para credenciales
# Copia este archivo como .env y completa con tus credenciales

# MySQL/MariaDB
DB_USER=backup_user
DB_PASSWORD=tu_password_seguro

# Servidor FTP
FTP_USER=ftp_user
FTP_PASSWORD=otro_password
"""

    @classmethod
    def ensure_directories(cls):
        """Crea el directorio de logs si no existe"""
        cls.LOG_DIR.mkdir(parents=True, exist_ok=True)
