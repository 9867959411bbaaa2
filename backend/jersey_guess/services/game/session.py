"""Game session state machine.

One session is one playthrough: 20 levels of 5 questions, each question on a
15 second countdown. Answers, skips and timeouts are scored, revealed, and
after a short pause the session advances to the next question, to the
level-complete screen, or to game complete.

Scheduled callbacks carry the identity of the question they were set for.
Loading a question, restarting or closing bumps that identity, so a callback
left over from an earlier question is dropped instead of acting on the new
one.
"""

from __future__ import annotations

import logging
import random
import threading
from dataclasses import dataclass
from functools import partial
from typing import Callable, Optional

from jersey_guess.errors import NameRequired, SaveFailed, ValidationError

from .catalog import Catalog
from .difficulty import tier_for_level
from .questions import Question, generate_question
from .timers import Scheduler, TimerHandle

logger = logging.getLogger(__name__)

QUESTIONS_PER_LEVEL = 5
TOTAL_LEVELS = 20
QUESTION_TIME_LIMIT = 15
DEFAULT_ADVANCE_DELAY = 4.0

AWAITING_QUESTION = 'awaiting_question'
QUESTION_ACTIVE = 'question_active'
ANSWERED = 'answered'
LEVEL_COMPLETE = 'level_complete'
GAME_COMPLETE = 'game_complete'

CORRECT = 'correct'
WRONG = 'wrong'
SKIPPED = 'skipped'
TIMEOUT = 'timeout'

Listener = Callable[[str, dict], None]


@dataclass(frozen=True, slots=True)
class AnswerOutcome:
    kind: str
    correct_index: int
    correct_option: str
    selected_index: Optional[int] = None

    @property
    def is_correct(self) -> bool:
        return self.kind == CORRECT

    def to_dict(self) -> dict:
        return {
            'kind': self.kind,
            'correct': self.is_correct,
            'selected_index': self.selected_index,
            'correct_index': self.correct_index,
            'correct_option': self.correct_option,
        }


class GameSession:
    def __init__(
        self,
        catalog: Catalog,
        scheduler: Scheduler,
        submitter=None,
        listener: Optional[Listener] = None,
        advance_delay: float = DEFAULT_ADVANCE_DELAY,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.catalog = catalog
        self._scheduler = scheduler
        self._submitter = submitter
        self._listener = listener
        self.advance_delay = advance_delay
        self._rng = rng or random.Random()
        self._lock = threading.RLock()

        self._countdown: Optional[TimerHandle] = None
        self._pending_advance: Optional[TimerHandle] = None
        self._question_token = 0

        self.state = AWAITING_QUESTION
        self.question: Optional[Question] = None
        self.last_outcome: Optional[AnswerOutcome] = None
        self._reset_counters()

    def _reset_counters(self) -> None:
        self.level = 1
        self.question_in_level = 1
        self.total_answered = 0
        self.correct_count = 0
        self.wrong_count = 0
        self.skipped_count = 0
        self.time_remaining = QUESTION_TIME_LIMIT
        self.answered = False
        self.saved = False
        self.saved_record: Optional[dict] = None
        self._submitting = False

    def _emit(self, event: str, payload: Optional[dict] = None) -> None:
        if self._listener is not None:
            self._listener(event, payload if payload is not None else self.to_dict())

    # ---- timers ----

    def _cancel_timers(self) -> None:
        if self._countdown is not None:
            self._countdown.cancel()
            self._countdown = None
        if self._pending_advance is not None:
            self._pending_advance.cancel()
            self._pending_advance = None

    def _stop_countdown(self) -> None:
        if self._countdown is not None:
            self._countdown.cancel()
            self._countdown = None

    def _on_tick(self, token: int) -> None:
        with self._lock:
            if token != self._question_token:
                logger.debug(f"[timer-abort] tick token={token} current={self._question_token}")
                return
            self.tick()

    def _on_advance_due(self, token: int) -> None:
        with self._lock:
            if token != self._question_token:
                logger.debug(f"[timer-abort] advance token={token} current={self._question_token}")
                return
            self._pending_advance = None
            self.advance()

    def _schedule_advance(self) -> None:
        if self._pending_advance is not None:
            self._pending_advance.cancel()
        self._pending_advance = self._scheduler.call_later(
            self.advance_delay,
            partial(self._on_advance_due, self._question_token),
            label=f"advance q={self._question_token}",
        )

    # ---- transitions ----

    def _load_question(self) -> None:
        self._cancel_timers()
        self._question_token += 1
        self.last_outcome = None
        tier = tier_for_level(self.level)
        question = generate_question(tier, self.catalog, self._rng)
        if question is None:
            self.question = None
            self.state = AWAITING_QUESTION
            logger.warning(f"[question-missing] level={self.level} tier={tier}")
            return

        self.question = question
        self.time_remaining = QUESTION_TIME_LIMIT
        self.answered = False
        self.state = QUESTION_ACTIVE
        self._countdown = self._scheduler.call_every(
            1,
            partial(self._on_tick, self._question_token),
            label=f"countdown q={self._question_token}",
        )
        logger.info(
            f"[question] level={self.level} question={self.question_in_level} tier={tier} jersey={question.entity.jersey}"
        )
        self._emit('question')

    def start(self) -> None:
        """Start a new game, discarding any progress."""
        with self._lock:
            self._cancel_timers()
            self._reset_counters()
            self.state = AWAITING_QUESTION
            self.question = None
            self._load_question()

    def restart(self) -> None:
        logger.info(f"[restart] from level={self.level} answered={self.total_answered}")
        self.start()

    def tick(self) -> None:
        with self._lock:
            if self.state != QUESTION_ACTIVE or self.answered:
                return
            self.time_remaining = max(0, self.time_remaining - 1)
            self._emit('tick', {'time_remaining': self.time_remaining})
            if self.time_remaining == 0:
                self._time_up()

    def _time_up(self) -> None:
        self._stop_countdown()
        self.answered = True
        self.wrong_count += 1
        self._reveal(TIMEOUT)

    def _reveal(self, kind: str, selected_index: Optional[int] = None) -> AnswerOutcome:
        outcome = AnswerOutcome(
            kind=kind,
            correct_index=self.question.correct_index,
            correct_option=self.question.correct_option,
            selected_index=selected_index,
        )
        self.last_outcome = outcome
        self.state = ANSWERED
        logger.info(f"[answer] level={self.level} question={self.question_in_level} kind={kind}")
        self._emit('answer_result', {**outcome.to_dict(), 'session': self.to_dict()})
        self._schedule_advance()
        return outcome

    def select_answer(self, index: int) -> Optional[AnswerOutcome]:
        """Score the chosen option. No-op once the question is answered."""
        with self._lock:
            if self.state != QUESTION_ACTIVE or self.answered:
                return None
            if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < len(self.question.options):
                logger.warning(f"[answer-ignored] index={index!r}")
                return None
            self._stop_countdown()
            self.answered = True
            if index == self.question.correct_index:
                self.correct_count += 1
                return self._reveal(CORRECT, index)
            self.wrong_count += 1
            return self._reveal(WRONG, index)

    def skip(self) -> Optional[AnswerOutcome]:
        with self._lock:
            if self.state != QUESTION_ACTIVE or self.answered:
                return None
            self._stop_countdown()
            self.answered = True
            self.skipped_count += 1
            return self._reveal(SKIPPED)

    def advance(self) -> None:
        """Move past an answered question."""
        with self._lock:
            if self.state != ANSWERED:
                return
            self.total_answered += 1
            if self.question_in_level + 1 > QUESTIONS_PER_LEVEL:
                self._cancel_timers()
                self.question = None
                if self.level >= TOTAL_LEVELS:
                    self.state = GAME_COMPLETE
                    logger.info(
                        f"[game-complete] correct={self.correct_count} wrong={self.wrong_count} skipped={self.skipped_count}"
                    )
                    self._emit('game_complete')
                else:
                    self.state = LEVEL_COMPLETE
                    logger.info(f"[level-complete] level={self.level}")
                    self._emit('level_complete')
                return
            self.question_in_level += 1
            self._load_question()

    def next_level(self) -> bool:
        with self._lock:
            if self.state != LEVEL_COMPLETE:
                return False
            self.level += 1
            self.question_in_level = 1
            self._load_question()
            return True

    def save_score(self, name) -> Optional[dict]:
        """Submit the final tallies once. Returns the stored record on success.

        A blank name emits ``name_required``; a failed submission emits
        ``save_failed`` and leaves the session ready for another attempt.
        """
        with self._lock:
            if self.state != GAME_COMPLETE:
                return None
            if self.saved:
                return self.saved_record
            if self._submitting:
                return None
            if self._submitter is None:
                logger.warning("[score-save-failed] session has no score submitter")
                self._emit('save_failed', {'message': 'Scores cannot be saved right now', 'retryable': False})
                return None
            self._submitting = True
            token = self._question_token
            tallies = (self.level, self.correct_count, self.wrong_count, self.skipped_count)

        try:
            record = self._submitter.submit(name, *tallies)
        except NameRequired as exc:
            self._emit('name_required', {'message': exc.message})
            return None
        except ValidationError as exc:
            logger.warning(f"[score-rejected] {exc.message}")
            self._emit('save_failed', {'message': 'Invalid score data', 'retryable': False})
            return None
        except SaveFailed as exc:
            logger.warning(f"[score-save-failed] {exc.message}")
            self._emit('save_failed', {'message': 'Failed to save your score. Please try again.', 'retryable': True})
            return None
        else:
            with self._lock:
                # a restart while the request was out belongs to a new game
                if token != self._question_token:
                    return record
                self.saved = True
                self.saved_record = record
        finally:
            with self._lock:
                if token == self._question_token:
                    self._submitting = False

        self._emit('score_saved', {'record': record, 'session': self.to_dict()})
        return record

    def close(self) -> None:
        """Cancel everything pending; stale callbacks become no-ops."""
        with self._lock:
            self._cancel_timers()
            self._question_token += 1

    def to_dict(self) -> dict:
        return {
            'state': self.state,
            'level': self.level,
            'question_in_level': self.question_in_level,
            'total_answered': self.total_answered,
            'correct_count': self.correct_count,
            'wrong_count': self.wrong_count,
            'skipped_count': self.skipped_count,
            'time_remaining': self.time_remaining,
            'answered': self.answered,
            'saved': self.saved,
            'question': self.question.to_dict() if self.question else None,
            'tier': tier_for_level(self.level),
        }
