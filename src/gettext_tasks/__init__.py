"""
gettext-tasks - build tasks for the GNU gettext localization workflow.
"""

import asyncio
import sys
from .main import main as async_main


def main() -> None:
    """Synchronous entry point that runs the async main function."""
    try:
        exit_code = asyncio.run(async_main())
    except KeyboardInterrupt:
        import logging

        logger = logging.getLogger(__name__)
        logger.info("Interrupted by user")
        exit_code = 130
    sys.exit(exit_code)


__all__ = ["main"]
