import json
import os
import shutil
import tempfile
import unittest
from unittest import mock

from src.hooks import global_setup as global_setup_mod
from src.hooks.global_setup import global_setup
from src.utils.config import TestEnvConfig
from src.utils.logger import reset_logging


class TestGlobalSetup(unittest.TestCase):
    def setUp(self):
        self.base_dir = tempfile.mkdtemp()
        self.addCleanup(shutil.rmtree, self.base_dir)
        self.addCleanup(reset_logging)
        self.config = TestEnvConfig(base_dir=self.base_dir, environment="staging", is_ci=True)
        self.lines = []

    def marker(self, name):
        with open(os.path.join(self.base_dir, "test-results", name), encoding="utf-8") as f:
            return json.load(f)

    def test_creates_all_directories(self):
        global_setup(self.config, echo=self.lines.append)

        for directory in self.config.required_dirs():
            self.assertTrue(os.path.isdir(directory), directory)
        self.assertEqual(len(self.lines), 2)
        self.assertTrue(self.lines[0].endswith(os.path.join("test-results", "screenshots")))
        self.assertTrue(self.lines[1].endswith(os.path.join("test-results", "reports")))

    def test_writes_completion_marker(self):
        info = global_setup(self.config, echo=self.lines.append)

        self.assertEqual(self.marker("global-setup-complete.json"), info)
        self.assertEqual(info["setup"], "completed")
        self.assertEqual(info["environment"], "staging")
        self.assertTrue(info["isCI"])
        self.assertEqual(info["config"], {"logLevel": "INFO"})
        self.assertEqual(info["directories"],
                         [self.config.relative(d) for d in self.config.required_dirs()])

    def test_logs_go_to_results_dir(self):
        global_setup(self.config, echo=self.lines.append)
        reset_logging()

        logs = os.listdir(self.config.logs_dir)
        for name in ("test-execution.log", "errors.log", "debug.log"):
            self.assertIn(name, logs)

    def test_banner_and_directory_lines_are_logged(self):
        global_setup(self.config, echo=self.lines.append)
        reset_logging()

        with open(os.path.join(self.config.logs_dir, "test-execution.log"), encoding="utf-8") as f:
            execution = f.read()
        self.assertIn("Environment: staging (CI)", execution)
        self.assertIn(f"Working directory: {self.base_dir}", execution)
        self.assertIn("Platform:", execution)
        self.assertIn("Exists: test-results", execution)
        self.assertIn("Created: html-report", execution)
        self.assertIn("Created: test-results-json", execution)

    def test_second_run_creates_nothing(self):
        global_setup(self.config, echo=self.lines.append)
        self.lines.clear()

        global_setup(self.config, echo=self.lines.append)
        self.assertEqual(self.lines, [])

    def test_failure_writes_marker_and_reraises(self):
        with mock.patch.object(global_setup_mod, "setup_test_environment",
                               side_effect=PermissionError("denied")):
            with self.assertRaises(PermissionError):
                global_setup(self.config, echo=self.lines.append)

        failed = self.marker("global-setup-failed.json")
        self.assertEqual(failed["setup"], "failed")
        self.assertEqual(failed["error"], "denied")
        self.assertIn("PermissionError", failed["traceback"])
        self.assertFalse(os.path.exists(
            os.path.join(self.base_dir, "test-results", "global-setup-complete.json")))

    def test_marker_failure_keeps_original_error(self):
        with open(os.path.join(self.base_dir, "test-results"), "w") as f:
            f.write("not a directory")

        with self.assertRaises(OSError) as ctx:
            global_setup(self.config, echo=self.lines.append)
        self.assertNotIsInstance(ctx.exception, FileExistsError)


if __name__ == "__main__":
    unittest.main()
