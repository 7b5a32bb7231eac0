#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
LibreTranslator - interactive text translator

Entry point for the NiceGUI-based translator.
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))


def setup_logging(verbose: bool = False):
    """Configure logging to console and file.

    Log file location: ~/.libretranslator/logs/app.log (UTF-8, append mode)

    Returns:
        tuple: (console_handler, file_handler) to keep references alive
    """
    logs_dir = Path.home() / ".libretranslator" / "logs"
    log_file_path = logs_dir / "app.log"

    # Console handler first (always works)
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    console_handler.setFormatter(logging.Formatter(
        '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%H:%M:%S'
    ))

    file_handler = None
    try:
        logs_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file_path, mode='a', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
    except OSError as e:
        # Fall back to console-only logging
        print(f"[WARNING] Failed to create log file {log_file_path}: {e}", file=sys.stderr)
        file_handler = None

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.addHandler(console_handler)
    if file_handler:
        root_logger.addHandler(file_handler)

    # Suppress verbose logging from third-party libraries
    for name in ['uvicorn', 'uvicorn.error', 'uvicorn.access',
                 'starlette', 'httpcore', 'httpx', 'urllib3',
                 'asyncio', 'concurrent', 'nicegui']:
        logging.getLogger(name).setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.info("=" * 60)
    logger.info("LibreTranslator starting...")
    logger.info("=" * 60)
    logger.debug("sys.argv: %s", sys.argv)
    if file_handler:
        logger.info("Log file: %s", log_file_path)
    else:
        logger.warning("File logging disabled - console only")

    return (console_handler, file_handler)


# Global reference to keep log handlers alive (prevents garbage collection)
_global_log_handlers = None


def main():
    """Main entry point"""
    parser = argparse.ArgumentParser(description="LibreTranslator")
    parser.add_argument('--settings', type=Path, default=None,
                        help="Base settings path (default: config/settings.json)")
    parser.add_argument('--verbose', action='store_true', help="Debug output on the console")
    args = parser.parse_args()

    global _global_log_handlers
    _global_log_handlers = setup_logging(verbose=args.verbose)
    logger = logging.getLogger(__name__)

    try:
        from libretranslator.ui.app import run_app
    except ImportError as e:
        logger.exception("Failed to import UI module: %s", e)
        raise

    try:
        run_app(settings_path=args.settings)
    except KeyboardInterrupt:
        logger.debug("Application shutdown via KeyboardInterrupt")
    except Exception as e:
        logger.exception("Application crashed: %s", e)
        raise


if __name__ in {'__main__', '__mp_main__'}:
    main()
