import argparse
import logging
import random
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor

from tictactoe import config
from tictactoe.engine import GameEngine
from tictactoe.ui.main_window import TicTacToeWindow

# -----------------------------------------------------------------------------
# DARK THEME
# -----------------------------------------------------------------------------

DARK_GREY = QColor(53, 53, 53)
DIM_GREY = QColor(127, 127, 127)
ACCENT = QColor(42, 130, 218)

PALETTE_ROLES = {
    QPalette.Window: DARK_GREY,
    QPalette.WindowText: Qt.white,
    QPalette.Base: QColor(35, 35, 35),
    QPalette.AlternateBase: DARK_GREY,
    QPalette.ToolTipBase: Qt.white,
    QPalette.ToolTipText: Qt.black,
    QPalette.Text: Qt.white,
    QPalette.Button: QColor(66, 66, 66),
    QPalette.ButtonText: Qt.white,
    QPalette.BrightText: Qt.red,
    QPalette.Link: ACCENT,
    QPalette.Highlight: ACCENT,
    QPalette.HighlightedText: Qt.white,
    QPalette.PlaceholderText: QColor(160, 160, 160),
}

DISABLED_ROLES = (QPalette.Text, QPalette.ButtonText, QPalette.WindowText)


def apply_default_palette(app: QApplication):
    """
    Apply the dark Fusion palette; disabled text is greyed out.
    """
    palette = QPalette()
    for role, color in PALETTE_ROLES.items():
        palette.setColor(role, color)
    for role in DISABLED_ROLES:
        palette.setColor(QPalette.Disabled, role, DIM_GREY)
    app.setPalette(palette)

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------


def build_parser():
    p = argparse.ArgumentParser(description="Tic-Tac-Toe with score tracking and a random AI")
    p.add_argument("--vs-ai", action="store_true", help="start with O played by the AI")
    p.add_argument("--ai-delay", type=int, default=config.AI_MOVE_DELAY_MS, metavar="MS",
                   help="milliseconds the AI waits before moving")
    p.add_argument("--seed", type=int, default=None, help="seed for the AI's random moves")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return p


def run(argv=None):
    ns, qt_args = build_parser().parse_known_args(argv)
    logging.basicConfig(level=logging.DEBUG if ns.verbose else logging.INFO,
                        format=config.LOG_FORMAT)
    if ns.ai_delay < 0:
        logging.error("AI delay must be >= 0, got %d", ns.ai_delay)
        return 2

    app = QApplication([sys.argv[0]] + qt_args)
    app.setStyle('Fusion')
    apply_default_palette(app)

    engine = GameEngine(ai_mode=ns.vs_ai, ai_delay_ms=ns.ai_delay,
                        rng=random.Random(ns.seed))
    window = TicTacToeWindow(engine)
    window.show()
    return app.exec()


if __name__ == '__main__':
    sys.exit(run())
