"""
GMS Console - Main entry point.

Management console for the championship organising committee:
registration review, sport entries, accreditation, logistics and documents.
"""

import asyncio
import logging
import sys

from aiohttp import web

from adapters.web.app import create_console_app
from adapters.web.loader import build_container
from config.features import features
from config.settings import load_settings
from infrastructure.database.supabase_client import SupabaseConfigError

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout),
        logging.FileHandler("console.log", encoding="utf-8"),
    ],
)
logger = logging.getLogger(__name__)

# Set DEBUG level only for our app loggers, not for noisy libraries
if features.DEBUG_MODE:
    for name in ['adapters', 'core', 'infrastructure', '__main__']:
        logging.getLogger(name).setLevel(logging.DEBUG)
    # Silence noisy HTTP debug logs
    logging.getLogger('httpx').setLevel(logging.WARNING)
    logging.getLogger('httpcore').setLevel(logging.WARNING)
    logging.getLogger('hpack').setLevel(logging.WARNING)


async def main():
    """Main function - wires the console and serves it until interrupted."""

    # Log feature status
    logger.info("=== GMS Console Starting ===")
    logger.info("Feature Flags:")
    for key, value in features.to_dict().items():
        logger.info(f"  {key}: {value}")

    settings = load_settings()
    try:
        container = build_container(settings)
    except SupabaseConfigError as e:
        logger.error(f"Cannot start: {e}")
        sys.exit(1)

    app = create_console_app(container)
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, settings.host, settings.port)
    await site.start()
    logger.info(f"Console running on http://{settings.host}:{settings.port} ({settings.env})")

    try:
        await asyncio.Event().wait()
    finally:
        await runner.cleanup()
        logger.info("Console web server stopped.")


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Console stopped by user (Ctrl+C)")
    except SystemExit as e:
        sys.exit(e.code)
