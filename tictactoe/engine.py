import logging
import random

from PySide6.QtCore import QObject, QTimer, Signal, Slot

from . import config
from .game_logic import (
    Mark, MoveResult, apply_move, choose_ai_move, new_round, result_of
)

log = logging.getLogger(__name__)


class GameEngine(QObject):
    """
    qt-side game session: round state, scores, names and the AI opponent
    """
    round_won = Signal(str, str)        # mark, display name
    round_draw = Signal()
    state_changed = Signal()            # anything the view shows changed

    def __init__(self, ai_mode=False, ai_delay_ms=config.AI_MOVE_DELAY_MS,
                 rng=None, parent=None):
        """
        init round, scores, names and the AI timer
        """
        super().__init__(parent)
        self._state = new_round()
        self._scores = {Mark.X: 0, Mark.O: 0}
        self._names = {Mark(m): n for m, n in config.DEFAULT_PLAYER_NAMES.items()}
        self._ai_mode = bool(ai_mode)
        self.ai_delay_ms = ai_delay_ms
        self._rng = rng if rng is not None else random.Random()
        # bumped whenever the (mark, board, mode) key changes
        self._generation = 0
        self._scheduled_generation = None
        self._ai_timer = QTimer(self)
        self._ai_timer.setSingleShot(True)
        self._ai_timer.timeout.connect(self._on_ai_timeout)
        self._sync_ai()

    # -------------------------------------------------------------------------
    # queries
    # -------------------------------------------------------------------------

    @property
    def state(self):
        return self._state

    @property
    def board(self):
        return self._state.board

    @property
    def current_mark(self):
        return self._state.current_mark

    @property
    def is_over(self):
        return self._state.is_over

    @property
    def winning_line(self):
        return self._state.winning_line

    @property
    def winner(self):
        return self._state.winner

    @property
    def scores(self):
        return dict(self._scores)

    @property
    def player_names(self):
        return dict(self._names)

    def player_name(self, mark):
        return self._names[Mark(mark)]

    @property
    def ai_mode(self):
        return self._ai_mode

    @property
    def ai_pending(self):
        """true while a delayed AI move is waiting to fire"""
        return self._ai_timer.isActive()

    # -------------------------------------------------------------------------
    # commands
    # -------------------------------------------------------------------------

    @Slot(int)
    def make_move(self, index):
        """
        place the current mark at index.
        returns a MoveResult; rejected moves leave everything untouched
        """
        before = self._state
        after = apply_move(before, index)
        res = result_of(before, after)
        if res is MoveResult.INVALID:
            log.debug("rejected move at %r (over=%s)", index, before.is_over)
            return res

        self._state = after
        mark = before.current_mark
        log.info("%s played %d", mark.value, index)

        if res is MoveResult.WIN:
            self._scores[mark] += 1
            log.info("%s wins round, score %s", mark.value, self._score_text())
        elif res is MoveResult.DRAW:
            log.info("round drawn, score %s", self._score_text())

        self._sync_ai()
        self.state_changed.emit()
        # the round only becomes terminal once, so these fire once per round
        if res is MoveResult.WIN:
            self.round_won.emit(mark.value, self._names[mark])
        elif res is MoveResult.DRAW:
            self.round_draw.emit()
        return res

    @Slot()
    def reset_round(self):
        """
        clear the board, X to move; scores and names stay
        """
        self._state = new_round()
        log.debug("round reset")
        self._sync_ai()
        self.state_changed.emit()

    @Slot()
    def reset_scores(self):
        """
        zero both scores and start a new round
        """
        self._scores = {Mark.X: 0, Mark.O: 0}
        log.info("scores reset")
        self.reset_round()

    @Slot(str, str)
    def set_player_name(self, mark, text):
        # free text, empty allowed
        self._names[Mark(mark)] = text
        self.state_changed.emit()

    @Slot(bool)
    def set_ai_mode(self, enabled):
        enabled = bool(enabled)
        if enabled == self._ai_mode:
            return
        self._ai_mode = enabled
        log.info("ai mode %s", "on" if enabled else "off")
        self._sync_ai()
        self.state_changed.emit()

    # -------------------------------------------------------------------------
    # AI scheduling
    # -------------------------------------------------------------------------

    def _ai_should_move(self):
        return (self._ai_mode and not self._state.is_over
                and self._state.current_mark is Mark.O)

    def _sync_ai(self):
        """
        drop any pending AI move and schedule a new one if O is the AI to move
        """
        self._generation += 1
        self._ai_timer.stop()
        self._scheduled_generation = None
        if self._ai_should_move():
            self._scheduled_generation = self._generation
            self._ai_timer.start(self.ai_delay_ms)
            log.debug("ai move scheduled in %d ms (gen %d)",
                      self.ai_delay_ms, self._generation)

    @Slot()
    def _on_ai_timeout(self):
        # stale timers belong to a board that no longer exists
        if self._scheduled_generation != self._generation:
            log.debug("ignoring stale ai move (gen %s)", self._scheduled_generation)
            return
        self._scheduled_generation = None
        if not self._ai_should_move():
            return
        index = choose_ai_move(self._state.board, self._rng)
        if index is None:
            return
        self.make_move(index)

    def _score_text(self):
        return f"X={self._scores[Mark.X]} O={self._scores[Mark.O]}"
