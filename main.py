#!/usr/bin/env python3
import sys
import os
import signal
import argparse
import logging
from pathlib import Path

from PySide6.QtWidgets import QApplication

# Add project root to path so imports work
sys.path.append(str(Path(__file__).parent))

from core.nav_graph import NavGraph
from ui.main_window import MainWindow

DEFAULT_GRAPHS = (
    NavGraph(1, "Home", "feed", ("feed", "article", "comments")),
    NavGraph(2, "Search", "query", ("query", "results", "detail")),
    NavGraph(3, "Profile", "overview", ("overview", "settings", "about")),
)


def parse_args():
    parser = argparse.ArgumentParser(description="Tabstack multi-graph navigation demo")
    parser.add_argument("--tabs", type=int, default=len(DEFAULT_GRAPHS),
                        help="Number of tabs to show (1-%d)" % len(DEFAULT_GRAPHS))
    parser.add_argument("--start", type=int, default=None, help="Graph id selected at startup")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log navigation state changes")
    return parser.parse_args()


def main():
    signal.signal(signal.SIGINT, signal.SIG_DFL)

    args = parse_args()

    debug = args.verbose or os.environ.get("TABSTACK_DEBUG") == "1"
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
    )

    graphs = DEFAULT_GRAPHS[:max(1, min(args.tabs, len(DEFAULT_GRAPHS)))]

    app = QApplication(sys.argv)
    app.setOrganizationName("Tabstack")
    app.setApplicationName("Tabstack")

    window = MainWindow(graphs, start_id=args.start)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
