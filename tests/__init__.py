"""
Tests del sistema de backup
"""
import os
import tempfile

# Los logs de los tests no deben ensuciar el directorio del proyecto
os.environ.setdefault("BACKUPIFY_LOG_DIR", tempfile.mkdtemp(prefix="backupify-logs-"))
