"""
Behave environment configuration for System DNS acceptance tests.
"""

import logging
import shutil
import sys
import tempfile
from pathlib import Path

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def before_all(context):
    """Set up test environment before all tests."""
    context.base_dir = Path(__file__).parent.parent


def before_scenario(context, scenario):
    """Set up each test scenario."""
    if sys.platform == "win32":
        scenario.skip("resolv.conf is not used on Windows")
        return

    context.test_data_dir = Path(tempfile.mkdtemp(prefix="system_dns_"))
    context.resolv_conf = context.test_data_dir / "resolv.conf"
    context.test_config = {
        "system_dns": {
            "sources": ["resolver"],
            "timeout": 5.0,
            "strict": False,
            "providers": {"resolver": {"filename": str(context.resolv_conf)}},
        }
    }
    context.error = None

    logger.info(f"Starting scenario: {scenario.name}")


def after_scenario(context, scenario):
    """Clean up after each test scenario."""
    test_data_dir = getattr(context, "test_data_dir", None)
    if test_data_dir is not None and test_data_dir.exists():
        shutil.rmtree(test_data_dir)

    logger.info(f"Completed scenario: {scenario.name}")
