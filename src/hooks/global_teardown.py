import logging
import os
from typing import Any, Dict, Optional

from src.utils.config import TestEnvConfig

logger = logging.getLogger(__name__)

SCREENSHOT_TYPES = ('.png', '.jpeg', '.jpg')


def global_teardown(config: Optional[TestEnvConfig] = None) -> Dict[str, Any]:
    """Log what the run left under test-results. Errors only fail the run in CI."""
    config = config or TestEnvConfig.from_env()
    summary: Dict[str, Any] = {"reports": [], "videoDirs": [], "screenshots": 0}
    try:
        logger.info("Global teardown: verifying generated files")

        if os.path.isdir(config.reports_dir):
            summary["reports"] = sorted(os.listdir(config.reports_dir))
            logger.info(f"Generated report files: {', '.join(summary['reports']) or 'none'}")
        else:
            logger.warning("Reports directory not found")

        if os.path.isdir(config.results_dir):
            summary["videoDirs"] = sorted(
                name for name in os.listdir(config.results_dir)
                if '-video-' in name and os.path.isdir(os.path.join(config.results_dir, name))
            )
            logger.info(f"Video directories found: {len(summary['videoDirs'])}")
        else:
            logger.warning("test-results directory not found")

        if os.path.isdir(config.screenshots_dir):
            summary["screenshots"] = sum(
                1 for name in os.listdir(config.screenshots_dir)
                if name.lower().endswith(SCREENSHOT_TYPES)
            )
            logger.info(f"Screenshots found: {summary['screenshots']}")

        logger.info("Global teardown completed")
    except Exception as e:
        logger.error(f"Global teardown failed: {str(e)}")
        if config.is_ci:
            raise
    return summary
