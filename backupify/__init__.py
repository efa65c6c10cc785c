"""
Backup de bases de datos MySQL a un servidor FTP
"""
__version__ = "1.0.0"

from .config import Config
from .logger import LoggerService

__all__ = ['Config', 'LoggerService']
