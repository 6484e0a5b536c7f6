import logging

from .. import config
from ..game_logic import Mark
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QLineEdit,
    QGroupBox, QMessageBox, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot

log = logging.getLogger(__name__)


class TicTacToeWindow(QMainWindow):
    """
    main window UI: renders engine state, forwards clicks and edits
    """
    def __init__(self, engine):
        """
        init ui widgets, signals
        """
        super().__init__()
        self.engine = engine
        self.board_widget = BoardWidget(self.engine, parent=self)
        self.name_inputs = {}; self.score_labels = {}
        self.game_over_box = None

        self._setup_ui()
        self.engine.state_changed.connect(self._refresh)
        self.engine.round_won.connect(self._on_round_won)
        self.engine.round_draw.connect(self._on_round_draw)
        self._refresh()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle(config.WINDOW_TITLE)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self.mode_button = QPushButton()
        self.mode_button.setCheckable(True)
        self.mode_button.toggled.connect(self.engine.set_ai_mode)
        self.main_layout.addWidget(self.mode_button, alignment=Qt.AlignCenter)
        self._create_score_cards()         # names, marks, scores
        self.main_layout.addWidget(self.score_widget)
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self._create_bottom_controls()     # status + buttons
        self.main_layout.addWidget(self.controls_bottom_widget)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        round_action = QAction("New Round", self)
        round_action.triggered.connect(self.engine.reset_round)
        scores_action = QAction("Reset Scores", self)
        scores_action.triggered.connect(self.engine.reset_scores)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        for act in (round_action, scores_action): game_menu.addAction(act)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_player_card(self, mark, placeholder):
        '''name input, mark and score for one player'''
        card = QGroupBox()
        layout = QVBoxLayout(card)
        name_input = QLineEdit()
        name_input.setPlaceholderText(placeholder)
        name_input.setAlignment(Qt.AlignCenter)
        # textEdited only fires on user edits, not on setText from _refresh
        name_input.textEdited.connect(
            lambda text, m=mark: self.engine.set_player_name(m, text)
        )
        symbol = QLabel(mark.value)
        f = QFont(); f.setPointSize(24); f.setBold(True); symbol.setFont(f)
        score = QLabel("0")
        f = QFont(); f.setPointSize(16); score.setFont(f)
        for w in (name_input, symbol, score):
            layout.addWidget(w, alignment=Qt.AlignCenter)
        self.name_inputs[mark] = name_input; self.score_labels[mark] = score
        return card

    def _create_score_cards(self):
        # X card, turn arrow, O card
        self.score_widget = QWidget()
        hl = QHBoxLayout(self.score_widget)
        self.turn_arrow = QLabel()
        f = QFont(); f.setPointSize(24); self.turn_arrow.setFont(f)
        hl.addStretch(1)
        hl.addWidget(self._create_player_card(Mark.X, config.DEFAULT_PLAYER_NAMES["X"]))
        hl.addWidget(self.turn_arrow)
        hl.addWidget(self._create_player_card(Mark.O, config.O_NAME_PLACEHOLDER))
        hl.addStretch(1)

    def _create_bottom_controls(self):
        # status label + reset buttons
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.message_label.setWordWrap(True)
        self.reset_button = QPushButton("Reset Game"); self.reset_button.clicked.connect(self.engine.reset_round)
        self.reset_scores_button = QPushButton("Reset Scores"); self.reset_scores_button.clicked.connect(self.engine.reset_scores)
        for w in (self.message_label, None, self.reset_button, self.reset_scores_button):
            if w: hl.addWidget(w)
            else: hl.addStretch(1)

    def _update_message(self, text, is_success=False, is_turn=False):
        # set message text + style
        style = "color: #eee;"
        if is_success: style = "color: lime; font-weight: bold;"
        elif is_turn:  style = "color: #8acaff; font-weight: bold;"
        self.message_label.setStyleSheet(style)
        self.message_label.setText(text)

    @Slot()
    def _refresh(self):
        '''re-render everything from engine state'''
        engine = self.engine
        ai = engine.ai_mode
        if self.mode_button.isChecked() != ai:
            self.mode_button.setChecked(ai)
        self.mode_button.setText(config.VS_AI_TEXT if ai else config.VS_PLAYER_TEXT)

        names = engine.player_names; scores = engine.scores
        for mark in Mark:
            inp = self.name_inputs[mark]
            if inp.text() != names[mark]:
                inp.setText(names[mark])
            self.score_labels[mark].setText(str(scores[mark]))
        # the AI's name is fixed while it plays O
        self.name_inputs[Mark.O].setReadOnly(ai)
        self.turn_arrow.setText("←" if engine.current_mark is Mark.X else "→")

        # no human input while the AI is thinking
        self.board_widget.set_accept_clicks(not engine.is_over and not engine.ai_pending)
        self.board_widget.update()

        if engine.is_over:
            if engine.winner is not None:
                self._update_message(f"{names[engine.winner]} wins!", is_success=True)
            else:
                self._update_message(config.DRAW_MESSAGE, is_success=True)
        else:
            self._close_game_over()
            self._update_message(f"{names[engine.current_mark]}'s turn", is_turn=True)

    @Slot(int)
    def _on_cell_clicked(self, index):
        if self.engine.make_move(index) == "invalid":
            log.debug("click on %d ignored", index)

    @Slot(str, str)
    def _on_round_won(self, mark, name):
        self._show_game_over(f"{name} wins!")

    @Slot()
    def _on_round_draw(self):
        self._show_game_over(config.DRAW_MESSAGE)

    def _show_game_over(self, text):
        '''non-blocking "Game Over" box, Next Round resets the board'''
        self._close_game_over()
        box = QMessageBox(self)
        box.setWindowTitle(config.GAME_OVER_TITLE)
        box.setText(config.GAME_OVER_TITLE)
        box.setInformativeText(text)
        next_button = box.addButton(config.NEXT_ROUND_TEXT, QMessageBox.AcceptRole)
        next_button.clicked.connect(self.engine.reset_round)
        # closed boxes are deleted, not kept as children of the window
        box.setAttribute(Qt.WA_DeleteOnClose)
        box.finished.connect(lambda _, b=box: self._on_game_over_finished(b))
        self.game_over_box = box
        box.open()

    def _on_game_over_finished(self, box):
        if self.game_over_box is box:
            self.game_over_box = None

    def _close_game_over(self):
        if self.game_over_box is not None:
            self.game_over_box.close()
            self.game_over_box = None

    def closeEvent(self, event):
        # drop any pending dialog on close
        self._close_game_over()
        event.accept()
