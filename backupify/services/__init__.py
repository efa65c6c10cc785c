"""
Servicios de la aplicación
"""
from .archive_service import ArchiveService, archive_name
from .backup_service import BackupService
from .transfer_service import TransferService

__all__ = [
    'ArchiveService',
    'BackupService',
    'TransferService',
    'archive_name'
]
