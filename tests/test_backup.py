"""
Tests unitarios para modelos y configuración
"""
import json
import os
import shutil
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

# Agregar raíz del proyecto al path
sys.path.insert(0, str(Path(__file__).parent.parent))

from backupify.config import Config
from backupify.errors import ConfigError
from backupify.models import BackupConfig, DumpResult, RunSummary
from backupify.repositories.config_repository import ConfigRepository


class TestModels(unittest.TestCase):
    """Tests para modelos de datos"""

    def test_backup_config_defaults(self):
        """Los campos ausentes quedan vacíos"""
        config = BackupConfig()
        self.assertEqual(config.mysql_host, "")
        self.assertEqual(config.databases, ())
        self.assertEqual(config.ftp_directory, "")
        self.assertEqual(config.dump_command, "mysqldump")
        self.assertTrue(config.allow_empty_archive)

    def test_backup_config_is_immutable(self):
        config = BackupConfig(mysql_host="db")
        with self.assertRaises(AttributeError):
            config.mysql_host = "other"

    def test_dump_file_for(self):
        """El volcado es <directorio>/<base>.sql"""
        config = BackupConfig(backup_directory="/var/backups/mysql")
        self.assertEqual(config.dump_file_for("app"), Path("/var/backups/mysql/app.sql"))

    def test_repr_hides_passwords(self):
        config = BackupConfig(mysql_password="s3cret", ftp_password="ftp-s3cret")
        self.assertNotIn("s3cret", repr(config))

    def test_dump_result_str(self):
        ok = DumpResult(database_name="app", success=True, output_file="/tmp/app.sql", duration_seconds=1.5)
        failed = DumpResult(database_name="billing", success=False, error="exit 2")
        self.assertIn("app", str(ok))
        self.assertIn("exit 2", str(failed))

    def test_run_summary_helpers(self):
        summary = RunSummary(results=[
            DumpResult(database_name="app", success=True, output_file="/tmp/app.sql"),
            DumpResult(database_name="billing", success=False, error="boom"),
        ])
        self.assertEqual(summary.dumped_files, [Path("/tmp/app.sql")])
        self.assertEqual([r.database_name for r in summary.failed], ["billing"])


class TestConfigRepository(unittest.TestCase):
    """Tests para ConfigRepository"""

    def setUp(self):
        """Setup para tests"""
        self.temp_dir = tempfile.mkdtemp()
        self.config_file = Path(self.temp_dir) / "config.json"
        self.repo = ConfigRepository(self.config_file)

    def tearDown(self):
        """Cleanup después de tests"""
        if Path(self.temp_dir).exists():
            shutil.rmtree(self.temp_dir)

    def _write(self, data):
        self.config_file.write_text(json.dumps(data), encoding='utf-8')

    def test_load_nonexistent_config(self):
        """Un archivo inexistente es un error fatal"""
        with self.assertRaises(ConfigError):
            self.repo.load()

    def test_load_invalid_json(self):
        self.config_file.write_text("{not json", encoding='utf-8')
        with self.assertRaises(ConfigError):
            self.repo.get_config()

    def test_load_non_object(self):
        self._write(["app"])
        with self.assertRaises(ConfigError):
            self.repo.get_config()

    def test_get_config_full(self):
        self._write({
            "mysql_host": "db.local",
            "mysql_user": "backup",
            "mysql_password": "pw",
            "databases": ["app", "billing"],
            "backup_directory": "/srv/backups",
            "ftp_host": "ftp.local:2121",
            "ftp_user": "uploader",
            "ftp_password": "ftp-pw",
            "ftp_directory": "/incoming"
        })
        config = self.repo.get_config()
        self.assertEqual(config.mysql_host, "db.local")
        self.assertEqual(config.databases, ("app", "billing"))
        self.assertEqual(config.backup_directory, "/srv/backups")
        self.assertEqual(config.ftp_host, "ftp.local:2121")
        self.assertEqual(config.ftp_directory, "/incoming")

    def test_missing_and_unknown_fields(self):
        """Campos ausentes por defecto, desconocidos ignorados"""
        self._write({"databases": ["app"], "schema_version": 7})
        config = self.repo.get_config()
        self.assertEqual(config.databases, ("app",))
        self.assertEqual(config.mysql_user, "")
        self.assertEqual(config.ftp_host, "")
        self.assertEqual(config.dump_command, "mysqldump")

    def test_wrong_types_are_rejected(self):
        self._write({"databases": "app"})
        with self.assertRaises(ConfigError):
            self.repo.get_config()

        repo = ConfigRepository(self.config_file)
        self._write({"mysql_host": 3306})
        with self.assertRaises(ConfigError):
            repo.get_config()

    def test_databases_must_be_a_list(self):
        """Valores falsos que no son lista no equivalen a una lista vacía"""
        for value in ("", 0, False, {}):
            with self.subTest(databases=value):
                self._write({"databases": value})
                with self.assertRaises(ConfigError):
                    ConfigRepository(self.config_file).get_config()

    def test_null_databases_is_empty(self):
        self._write({"databases": None})
        self.assertEqual(self.repo.get_config().databases, ())

    def test_resolve_credentials_from_environment(self):
        self._write({"mysql_password": "${BACKUPIFY_TEST_PW}", "ftp_password": "${BACKUPIFY_TEST_MISSING}"})
        with mock.patch.dict(os.environ, {"BACKUPIFY_TEST_PW": "from-env"}):
            os.environ.pop("BACKUPIFY_TEST_MISSING", None)
            config = self.repo.get_config()
        self.assertEqual(config.mysql_password, "from-env")
        self.assertEqual(config.ftp_password, "")

    def test_save_and_create_example_config(self):
        """Test guardar y cargar configuración de ejemplo"""
        self.assertTrue(self.repo.create_example_config())
        loaded = ConfigRepository(self.config_file).load()
        self.assertEqual(loaded["databases"], Config.DEFAULT_CONFIG["databases"])


if __name__ == '__main__':
    unittest.main()
