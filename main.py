#!/usr/bin/env python3
"""
snapnav - Point d'entrée de la landing page
===========================================

Lance la fenêtre de la landing page avec navigation par sections.
"""

import argparse
import os
import sys

from loguru import logger
from PySide6.QtWidgets import QApplication

from snapnav import __version__
from snapnav.config import NavigatorConfig
from snapnav.logging import configure_logging
from snapnav.views.landing_window import LANDING_NAVIGATOR_CONFIG, LandingWindow


class SnapNavApp(QApplication):
    """Application principale avec la fenêtre de landing page."""

    def __init__(self, args):
        super().__init__(args)
        self.setApplicationName("snapnav")
        self.setApplicationVersion(__version__)

        # Style sombre par défaut
        self.setStyleSheet("""
            QApplication {
                background-color: #2d2d2d;
                color: #ffffff;
            }
        """)
        self.window = None

    def run(self, config: NavigatorConfig) -> int:
        self.window = LandingWindow(config=config)
        self.window.show()
        return self.exec()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Landing page avec navigation par sections")
    parser.add_argument("--log-level", default=None, help="Niveau de log (DEBUG, INFO...)")
    parser.add_argument("--log-file", default=os.environ.get("SNAPNAV_LOG_FILE"), help="Fichier de log")
    parser.add_argument("--cooldown-ms", type=int, default=None,
                        help="Délai minimal entre deux sections (grand écran)")
    parser.add_argument("--compact-cooldown-ms", type=int, default=None,
                        help="Délai minimal entre deux sections (écran compact)")
    return parser.parse_args(argv)


def build_config(args) -> NavigatorConfig:
    overrides = {}
    if args.cooldown_ms is not None:
        overrides["normal_cooldown_ms"] = args.cooldown_ms
    if args.compact_cooldown_ms is not None:
        overrides["compact_cooldown_ms"] = args.compact_cooldown_ms
    return NavigatorConfig(**{**LANDING_NAVIGATOR_CONFIG.model_dump(), **overrides})


def main(argv=None):
    """Point d'entrée principal."""
    args = parse_args(argv)
    configure_logging(args.log_level, args.log_file)
    try:
        config = build_config(args)
        app = SnapNavApp(sys.argv[:1])
        app.setQuitOnLastWindowClosed(True)
        exit_code = app.run(config)
        logger.info(f"Application fermée avec le code: {exit_code}")
        return exit_code
    except KeyboardInterrupt:
        logger.info("Application interrompue par l'utilisateur")
        return 0
    except Exception as e:
        logger.exception(f"Erreur fatale: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
