import json
import logging
import os
import platform
import sys
import traceback
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional

from setup_test_env import setup_test_environment
from src.utils.config import TestEnvConfig
from src.utils.logger import configure_logging

logger = logging.getLogger(__name__)

SETUP_COMPLETE_FILE = 'global-setup-complete.json'
SETUP_FAILED_FILE = 'global-setup-failed.json'


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def _write_json(path: str, data: Dict[str, Any]):
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2)


def global_setup(config: Optional[TestEnvConfig] = None,
                 echo: Optional[Callable[[str], None]] = None) -> Dict[str, Any]:
    """
    Prepare the test-results tree once before any scenario runs.

    Points logging at test-results/logs, creates the screenshot/report
    directories plus the report side directories and drops a
    global-setup-complete.json marker describing the run. If anything fails
    a global-setup-failed.json marker is written and the error re-raised.
    """
    config = config or TestEnvConfig.from_env()
    try:
        configure_logging(config.logs_dir, config.log_level)
        logger.info("Global setup: initializing test environment")
        logger.info(f"Environment: {config.environment} ({'CI' if config.is_ci else 'Local'})")
        logger.info(f"Working directory: {config.base_dir}")
        logger.info(f"Platform: {sys.platform}")

        setup_test_environment(config.base_dir, echo=echo)

        for directory in config.required_dirs():
            if not os.path.exists(directory):
                os.makedirs(directory)
                logger.info(f"Created: {config.relative(directory)}")
            else:
                logger.info(f"Exists: {config.relative(directory)}")

        setup_info = {
            "timestamp": _timestamp(),
            "environment": config.environment,
            "isCI": config.is_ci,
            "platform": sys.platform,
            "pythonVersion": platform.python_version(),
            "setup": "completed",
            "directories": [config.relative(d) for d in config.required_dirs()],
            "config": {"logLevel": config.log_level},
        }
        _write_json(os.path.join(config.results_dir, SETUP_COMPLETE_FILE), setup_info)
        logger.info(f"Global setup completed, {len(setup_info['directories'])} directories ready")
        return setup_info
    except Exception as e:
        logger.error(f"Global setup failed: {str(e)}")
        _write_failure_marker(config, e)
        raise


def _write_failure_marker(config: TestEnvConfig, error: Exception):
    error_info = {
        "timestamp": _timestamp(),
        "error": str(error),
        "traceback": "".join(traceback.format_exception(type(error), error, error.__traceback__)),
        "setup": "failed",
    }
    try:
        os.makedirs(config.results_dir, exist_ok=True)
        _write_json(os.path.join(config.results_dir, SETUP_FAILED_FILE), error_info)
        logger.error(f"Error details saved to {SETUP_FAILED_FILE}")
    except OSError as marker_error:
        logger.error(f"Could not save error details: {str(marker_error)}")
