import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional

from setup_test_env import RESULTS_DIR

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class TestEnvConfig:
    base_dir: str = field(default_factory=os.getcwd)
    environment: str = 'development'
    is_ci: bool = False
    log_level: str = 'INFO'

    __test__ = False

    @classmethod
    def from_env(cls, base_dir: Optional[str] = None) -> "TestEnvConfig":
        """Build the run configuration from CI, TEST_ENV and LOG_LEVEL."""
        log_level = os.getenv('LOG_LEVEL', 'INFO').upper()
        if log_level not in LOG_LEVELS:
            logger.warning(f"Unknown LOG_LEVEL {log_level}, using INFO")
            log_level = 'INFO'
        return cls(
            base_dir=os.path.abspath(base_dir or os.getcwd()),
            environment=os.getenv('TEST_ENV', 'development'),
            is_ci=os.getenv('CI', '').lower() == 'true',
            log_level=log_level,
        )

    @property
    def results_dir(self):
        return os.path.join(self.base_dir, RESULTS_DIR)

    @property
    def screenshots_dir(self):
        return os.path.join(self.results_dir, 'screenshots')

    @property
    def reports_dir(self):
        return os.path.join(self.results_dir, 'reports')

    @property
    def logs_dir(self):
        return os.path.join(self.results_dir, 'logs')

    @property
    def html_report_dir(self):
        return os.path.join(self.base_dir, 'html-report')

    @property
    def json_results_dir(self):
        return os.path.join(self.base_dir, 'test-results-json')

    def required_dirs(self) -> List[str]:
        return [
            self.results_dir,
            self.reports_dir,
            self.logs_dir,
            self.screenshots_dir,
            self.html_report_dir,
            self.json_results_dir,
        ]

    def relative(self, path: str) -> str:
        return os.path.relpath(path, self.base_dir)
