"""
Recommendation session — the interactive loop.

AWAITING_PREFERENCES -> PREDICT_AND_CHECK -> PRESENTING -> TERMINAL, with two
loops back:
- a prediction already in history for this key sends the session straight back
  to PREDICT_AND_CHECK with the same query (no re-prompt);
- a declined recommendation sends it back to AWAITING_PREFERENCES.

A recommendation is recorded in history as soon as it is presented, whatever
the user's verdict. A deterministic classifier returns the same label for the
same query, so the duplicate loop only makes progress when the classifier
varies; max_duplicate_predictions optionally bounds it.
"""

import logging
from typing import Optional

from .models.config import RecommenderConfig, resolve_config
from .models.preferences import PreferenceQuery
from .models.session import SessionResult, SessionState
from .services.classifier import Classifier
from .services.history import RecommendationHistory
from .services.line_io import LineIO
from .services.preference_input import PreferenceInputReader

logger = logging.getLogger(__name__)

DUPLICATE_NOTICE = (
    "You've already received this recommendation before with the same preferences. "
    "Let's find another option..."
)
DUPLICATE_LIMIT_NOTICE = (
    "We couldn't find a new recommendation for these preferences. "
    "Please try different preferences."
)
VERDICT_PROMPT = "Do you like this recommendation? (yes/no)"
ACCEPTED_MESSAGE = (
    "Thank you for using the Smartphone Recommendation System. "
    "We're glad you liked our recommendation!"
)
DECLINED_MESSAGE = "Let's try adjusting your preferences to find a better match."


class RecommendationSession:
    """Runs the prompt → predict → present loop until a recommendation is accepted."""

    def __init__(
        self,
        classifier: Classifier,
        io: LineIO,
        history: Optional[RecommendationHistory] = None,
        config: Optional[RecommenderConfig] = None,
        reader: Optional[PreferenceInputReader] = None,
    ):
        self.classifier = classifier
        self.io = io
        self.history = history if history is not None else RecommendationHistory()
        self.config = resolve_config(config)
        self.reader = reader if reader is not None else PreferenceInputReader(io)

        self.state = SessionState.AWAITING_PREFERENCES
        self.predict_calls = 0
        self._query: Optional[PreferenceQuery] = None
        self._candidate: Optional[str] = None
        self._duplicates = 0

    def run(self) -> SessionResult:
        """
        Drive the session to TERMINAL.

        Raises:
            EndOfInputError: If input closes at any prompt
            ClassifierError: If the classifier cannot score a query
        """
        while self.state is not SessionState.TERMINAL:
            self.step()
        return SessionResult(
            device_name=self._candidate,
            query=self._query,
            predict_calls=self.predict_calls,
        )

    def step(self) -> SessionState:
        """Run the handler for the current state and return the next state."""
        if self.state is SessionState.AWAITING_PREFERENCES:
            self.state = self._await_preferences()
        elif self.state is SessionState.PREDICT_AND_CHECK:
            self.state = self._predict_and_check()
        elif self.state is SessionState.PRESENTING:
            self.state = self._present()
        return self.state

    def _await_preferences(self) -> SessionState:
        self._query = self.reader.read_query()
        self._duplicates = 0
        logger.debug("Preferences received: %s", self._query.key)
        return SessionState.PREDICT_AND_CHECK

    def _predict_and_check(self) -> SessionState:
        key = self._query.key
        predicted = self.classifier.predict(self._query)
        self.predict_calls += 1

        if self.history.has_shown(key, predicted):
            self._duplicates += 1
            logger.info("Duplicate prediction %r for %s (%d in a row)", predicted, key, self._duplicates)
            self.io.write(DUPLICATE_NOTICE)
            self.io.write()
            limit = self.config.max_duplicate_predictions
            if limit is not None and self._duplicates >= limit:
                self.io.write(DUPLICATE_LIMIT_NOTICE)
                self.io.write()
                return SessionState.AWAITING_PREFERENCES
            return SessionState.PREDICT_AND_CHECK

        self.history.record(key, predicted)
        self._candidate = predicted
        return SessionState.PRESENTING

    def _present(self) -> SessionState:
        self.io.write()
        self.io.write(f"The phone we recommend that will suit you the most is: {self._candidate}")
        self.io.write(VERDICT_PROMPT)
        verdict = self.io.read_line()

        if self.is_affirmative(verdict):
            logger.info("Recommendation %r accepted for %s", self._candidate, self._query.key)
            self.io.write()
            self.io.write(ACCEPTED_MESSAGE)
            return SessionState.TERMINAL

        logger.info("Recommendation %r declined for %s", self._candidate, self._query.key)
        self.io.write()
        self.io.write(DECLINED_MESSAGE)
        return SessionState.AWAITING_PREFERENCES

    def is_affirmative(self, verdict: str) -> bool:
        return verdict.strip().lower() == self.config.affirmative_token.strip().lower()
