"""
Main entry point for Flower Password.
"""

import sys
import argparse
import logging
from typing import Optional, List

from PyQt5.QtWidgets import QApplication
from PyQt5.QtCore import Qt

from flowerpass.ui import FlowerPasswordDialog
from flowerpass.settings import SettingsStore
from flowerpass.sitekey import site_key_from_url
from flowerpass.crypto import load_default_hasher, CollaboratorUnavailable
from flowerpass import config

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="flowerpass", description=config.APP_NAME)
    parser.add_argument("url", nargs="?", default="", help="Address of the site to derive a password for")
    parser.add_argument("--key", default=None, help="Use this site key instead of the one taken from the URL")
    parser.add_argument("--settings", default=None, help="Path to the settings file")
    return parser


def resolve_site_key(url: str, key_override: Optional[str] = None) -> str:
    """Site key for the dialog: the --key override if given, otherwise taken from the URL."""
    if key_override is not None:
        return key_override.strip()
    site_key = site_key_from_url(url)
    if url and not site_key:
        logger.warning(f"Could not extract a site key from {url!r}")
    return site_key


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(name)s - %(message)s')
    args = build_parser().parse_args(argv)

    # Enable high DPI scaling
    if hasattr(Qt, 'AA_EnableHighDpiScaling'):
        QApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)
    if hasattr(Qt, 'AA_UseHighDpiPixmaps'):
        QApplication.setAttribute(Qt.AA_UseHighDpiPixmaps, True)

    app = QApplication(sys.argv[:1])
    app.setApplicationName(config.APP_NAME)
    app.setStyle(config.APP_STYLE)

    site_key = resolve_site_key(args.url, args.key)

    try:
        hasher = load_default_hasher()
    except CollaboratorUnavailable as e:
        logger.error(f"{e}")
        hasher = None

    dialog = FlowerPasswordDialog(SettingsStore(args.settings), hasher, site_key=site_key)
    dialog.show()
    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
