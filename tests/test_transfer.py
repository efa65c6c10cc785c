"""
Tests para TransferService
"""
import shutil
import sys
import tempfile
import unittest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from backupify.errors import (
    TransferAuthError,
    TransferConnectionError,
    TransferError,
    TransferFileError,
    TransferStoreError,
)
from backupify.models import BackupConfig
from backupify.services.transfer_service import TransferService, parse_address
from tests.fakes import FakeFTP


class TestParseAddress(unittest.TestCase):

    def test_host_and_port(self):
        self.assertEqual(parse_address("ftp.local:2121"), ("ftp.local", 2121))

    def test_default_port(self):
        self.assertEqual(parse_address("ftp.local"), ("ftp.local", 21))

    def test_ipv6(self):
        self.assertEqual(parse_address("[::1]:2121"), ("::1", 2121))


class TestTransferService(unittest.TestCase):
    """Tests de subida con un cliente FTP falso"""

    def setUp(self):
        self.temp_dir = Path(tempfile.mkdtemp())
        self.archive = self.temp_dir / "backup_20240101_000000.tar.gz"
        self.archive.write_bytes(b"\x1f\x8barchive-bytes")
        self.config = BackupConfig(
            ftp_host="ftp.local:2121",
            ftp_user="uploader",
            ftp_password="ftp-pw",
            ftp_directory="/incoming/db",
        )

    def tearDown(self):
        shutil.rmtree(self.temp_dir)

    def _service(self, **failures):
        self.ftp = FakeFTP(**failures)
        return TransferService(self.config, ftp_factory=lambda: self.ftp)

    def test_upload_success(self):
        remote = self._service().upload(self.archive)
        self.assertEqual(remote, "/incoming/db/backup_20240101_000000.tar.gz")
        self.assertEqual(self.ftp.connected_to, ("ftp.local", 2121))
        self.assertEqual(self.ftp.logged_in_as, ("uploader", "ftp-pw"))
        self.assertEqual(self.ftp.stored[remote], b"\x1f\x8barchive-bytes")
        self.assertEqual(self.ftp.quit_calls, 1)
        self.assertEqual(self.ftp.close_calls, 0)

    def test_empty_directory_uses_basename(self):
        self.config = BackupConfig(ftp_host="ftp.local")
        remote = self._service().upload(self.archive)
        self.assertEqual(remote, "backup_20240101_000000.tar.gz")

    def test_connection_failure(self):
        with self.assertRaises(TransferConnectionError):
            self._service(fail_connect=True).upload(self.archive)
        self.assertEqual(self.ftp.quit_calls + self.ftp.close_calls, 1)

    def test_auth_failure(self):
        with self.assertRaises(TransferAuthError) as ctx:
            self._service(fail_login=True).upload(self.archive)
        self.assertIn("530", str(ctx.exception))
        self.assertEqual(self.ftp.quit_calls, 1)

    def test_local_file_missing(self):
        with self.assertRaises(TransferFileError):
            self._service().upload(self.temp_dir / "missing.tar.gz")
        self.assertEqual(self.ftp.stored, {})
        self.assertEqual(self.ftp.quit_calls, 1)

    def test_store_failure_closes_session_once(self):
        with self.assertRaises(TransferStoreError):
            self._service(fail_store=True).upload(self.archive)
        self.assertEqual(self.ftp.quit_calls, 1)
        self.assertEqual(self.ftp.close_calls, 0)

    def test_newline_in_remote_directory_is_a_store_error(self):
        self.config = BackupConfig(ftp_host="ftp.local", ftp_directory="/incoming\r\nDELE x")
        with self.assertRaises(TransferStoreError):
            self._service().upload(self.archive)
        self.assertEqual(self.ftp.stored, {})
        self.assertEqual(self.ftp.quit_calls, 1)

    def test_quit_failure_falls_back_to_close(self):
        self._service(fail_quit=True).upload(self.archive)
        self.assertEqual(self.ftp.quit_calls, 1)
        self.assertEqual(self.ftp.close_calls, 1)

    def test_repeated_failures_do_not_leak_sessions(self):
        sessions = []
        for _ in range(3):
            with self.assertRaises(TransferError):
                self._service(fail_store=True).upload(self.archive)
            sessions.append(self.ftp)
        self.assertTrue(all(s.quit_calls == 1 for s in sessions))


if __name__ == '__main__':
    unittest.main()
