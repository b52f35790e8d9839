from __future__ import annotations

import argparse
import os

from .logging_conf import FORMATS


def parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse CLI arguments for the cache refresher."""
    parser = argparse.ArgumentParser(
        description="Refresh GLib schema, desktop database and icon caches after install"
    )
    parser.add_argument(
        "--prefix",
        default=None,
        help="installation root (default: $RPM_INSTALL_PREFIX, else /usr)",
    )
    parser.add_argument("--log-level", default=os.getenv("LOG_LEVEL", "INFO").upper())
    parser.add_argument(
        "--log-format",
        default=os.getenv("LOG_FORMAT", "text").lower(),
        choices=FORMATS,
    )
    parser.add_argument(
        "--respect-destdir",
        action="store_true",
        help="do nothing when $DESTDIR is set (files are only being staged)",
    )
    # Maintainer-script arguments ("configure <version>", "1") are ignored.
    args, passthrough = parser.parse_known_args(argv)
    args.passthrough = passthrough
    return args
