"""Intent recognizer adapter backed by a DSPy program."""

import logging
import os
from typing import Protocol, runtime_checkable

import dspy

from coursebot.config.models import RecognizerConfig
from coursebot.core.errors import RecognitionError
from coursebot.du.base import safe_extract_result
from coursebot.du.models import IntentResult
from coursebot.du.signatures import RecognizeIntent

logger = logging.getLogger(__name__)


@runtime_checkable
class IntentRecognizer(Protocol):
    """What the orchestrator needs from an NLU backend."""

    def configured(self) -> bool:
        """Whether ``query`` may be called."""
        ...

    async def query(self, text: str) -> IntentResult:
        """Recognize ``text``. Raises RecognitionError on failure."""
        ...


class IntentClassifier(dspy.Module):
    """Single-call intent classification and entity extraction."""

    def __init__(self, use_cot: bool = False):
        super().__init__()
        if use_cot:
            self.extractor = dspy.ChainOfThought(RecognizeIntent)
        else:
            self.extractor = dspy.Predict(RecognizeIntent)

    async def aforward(self, user_message: str, intents: list[str]) -> IntentResult:
        prediction = await self.extractor.acall(
            user_message=user_message,
            available_intents=intents,
        )
        return safe_extract_result(
            prediction.result,
            IntentResult,
            default_factory=IntentResult.none,
            context="Intent recognition",
        )

    def forward(self, user_message: str, intents: list[str]) -> IntentResult:
        """Sync version (for testing/optimization)."""
        prediction = self.extractor(user_message=user_message, available_intents=intents)
        return safe_extract_result(
            prediction.result,
            IntentResult,
            default_factory=IntentResult.none,
            context="Intent recognition",
        )


class ModuleQueryRecognizer:
    """Recognizes course questions with a language model.

    Owns its LM and runs every prediction inside ``dspy.context`` rather than
    configuring dspy globally. When the config names no model, or the API key
    is missing, ``configured()`` is False and ``query`` must not be called.
    """

    def __init__(self, config: RecognizerConfig | None = None):
        self.config = config or RecognizerConfig()
        self._lm: dspy.LM | None = None
        self._classifier: IntentClassifier | None = None

        if self.config.is_configured:
            self._lm = dspy.LM(
                self.config.model_id,
                temperature=self.config.temperature,
                api_key=os.environ.get(self.config.api_key_env),
            )
            self._classifier = IntentClassifier(use_cot=self.config.use_reasoning)
            logger.info(f"Intent recognizer configured with {self.config.model_id}")
        else:
            logger.warning("Intent recognizer not configured (no model or API key)")

    def configured(self) -> bool:
        return self._classifier is not None

    async def query(self, text: str) -> IntentResult:
        if self._classifier is None or self._lm is None:
            raise RecognitionError("Intent recognizer is not configured")

        try:
            with dspy.context(lm=self._lm):
                result = await self._classifier.acall(
                    user_message=text, intents=self.config.intents
                )
        except Exception as e:
            raise RecognitionError(f"Intent recognition failed: {e}") from e

        logger.debug(f"Recognized {result.top_intent!r} ({result.score:.2f}) for {text!r}")
        return result
