"""Top-level orchestrator dialog and turn driver."""

import logging
from typing import Protocol

from coursebot.config.models import CourseConfig, MessagesConfig
from coursebot.core.constants import DialogTurnStatus, InputHint
from coursebot.core.errors import ConfigurationError
from coursebot.core.turn import TurnContext
from coursebot.core.types import ConversationState, DialogTurnResult, PromptOptions
from coursebot.dialogs.context import DialogSet
from coursebot.dialogs.interruption import continue_with_interruptions
from coursebot.dialogs.module_dialog import ModuleDialog
from coursebot.dialogs.prompts import TextPrompt
from coursebot.dialogs.waterfall import WaterfallDialog, WaterfallStepContext
from coursebot.du.models import module_entities
from coursebot.du.recognizer import IntentRecognizer

logger = logging.getLogger(__name__)

MAIN_DIALOG = "main_dialog"
MAIN_TEXT_PROMPT = "main_dialog.text_prompt"

INTENT_ASK_DURATION = "ask duration"
INTENT_ASK_UNITS = "ask units"
INTENT_GREETINGS = "greetings"


class StateAccessor(Protocol):
    """Loads the conversation state a turn belongs to."""

    async def get(self, turn_context: TurnContext) -> ConversationState: ...


class MainDialog(WaterfallDialog):
    """Greets, asks what the user wants, answers, then starts over.

    The dialog never ends on its own: the last step replaces it with a fresh
    copy carrying a follow-up message.
    """

    def __init__(
        self,
        recognizer: IntentRecognizer | None,
        module_dialog: ModuleDialog | None,
        messages: MessagesConfig | None = None,
        course: CourseConfig | None = None,
    ):
        super().__init__(MAIN_DIALOG)

        if recognizer is None:
            raise ConfigurationError("[MainDialog]: Missing parameter 'recognizer' is required")
        if module_dialog is None:
            raise ConfigurationError("[MainDialog]: Missing parameter 'module_dialog' is required")

        self.recognizer = recognizer
        self.module_dialog = module_dialog
        self.messages = messages or MessagesConfig()
        self.course = course or CourseConfig()

        self.dialogs = DialogSet()
        self.dialogs.add(self).add(TextPrompt(MAIN_TEXT_PROMPT))
        module_dialog.register(self.dialogs)

        self.steps = [self.intro_step, self.act_step, self.final_step]

    async def run(self, turn_context: TurnContext, accessor: StateAccessor) -> DialogTurnResult:
        """Handle one inbound message.

        Resumes whatever is in flight; if nothing is, begins this dialog.
        """
        state = await accessor.get(turn_context)
        dc = self.dialogs.create_context(turn_context, state)

        results = await continue_with_interruptions(dc, self.messages)
        if results.status == DialogTurnStatus.EMPTY:
            results = await dc.begin_dialog(self.id)
        return results

    async def intro_step(self, step: WaterfallStepContext) -> DialogTurnResult:
        """Show the welcome (or restart) message and wait for the question."""
        if not self.recognizer.configured():
            note = self.messages.recognizer_not_configured
            await step.send(note, note, InputHint.IGNORING_INPUT)
            return await step.next()

        text = step.options.get("restart_msg") or self.messages.welcome.format(
            grade=self.course.grade, course=self.course.name
        )
        return await step.prompt(MAIN_TEXT_PROMPT, PromptOptions(prompt=text))

    async def act_step(self, step: WaterfallStepContext) -> DialogTurnResult:
        """Recognize the question and answer it or hand off to the module dialog."""
        if not self.recognizer.configured():
            return await step.begin_dialog(self.module_dialog.id, {})

        result = await self.recognizer.query(step.result or "")
        intent = result.top_intent
        logger.info(f"Top intent: {intent!r}")

        if intent == INTENT_ASK_DURATION:
            text = self.messages.duration_template.format(
                grade=self.course.grade, course=self.course.name, hours=self.course.duration_hours
            )
            await step.send(text, text, InputHint.IGNORING_INPUT)

        elif intent == INTENT_ASK_UNITS:
            details = {"type": module_entities(result)}
            logger.info(f"Recognizer extracted these module details: {details}")
            return await step.begin_dialog(self.module_dialog.id, details)

        elif intent == INTENT_GREETINGS:
            text = self.messages.greeting
            await step.send(text, text, InputHint.IGNORING_INPUT)

        else:
            text = self.messages.not_understood_template.format(intent=intent)
            await step.send(text, text, InputHint.IGNORING_INPUT)

        return await step.next()

    async def final_step(self, step: WaterfallStepContext) -> DialogTurnResult:
        """Acknowledge a completed module query and start over."""
        # None here means the module dialog was declined or never ran.
        if step.result is not None:
            text = self.messages.acknowledgment
            await step.send(text, text, InputHint.IGNORING_INPUT)

        return await step.replace_dialog(self.id, {"restart_msg": self.messages.restart})
