# config/event_loop.py
import sys
import asyncio
import logging

logger = logging.getLogger(__name__)


def setup_event_loop():
    """Select an event loop policy Playwright can spawn subprocesses with on Windows"""
    if sys.platform == 'win32':
        try:
            asyncio.set_event_loop_policy(asyncio.WindowsProactorEventLoopPolicy())
            logger.info("WindowsProactorEventLoopPolicy set successfully")
        except Exception as e:
            logger.warning(f"Failed to set WindowsProactorEventLoopPolicy: {e}")
    else:
        logger.debug(f"Platform {sys.platform} - using default event loop")
