"""Prompt dialogs: suspend for one input and hand a typed value to the caller."""

import logging
import re
from abc import abstractmethod
from collections.abc import Iterable
from typing import Any

from coursebot.core.constants import InputHint
from coursebot.core.errors import DialogStackError
from coursebot.core.types import DialogInstance, DialogTurnResult, PromptOptions
from coursebot.dialogs.base import Dialog
from coursebot.dialogs.context import DialogContext

logger = logging.getLogger(__name__)

_NOT_RECOGNIZED = object()


def _active_frame(dc: DialogContext) -> DialogInstance:
    frame = dc.active_dialog
    if frame is None:
        raise DialogStackError("Prompt has no active frame on the dialog stack")
    return frame


class Prompt(Dialog):
    """Base prompt: shows a message, validates the reply, re-prompts when invalid."""

    async def begin_dialog(self, dc: DialogContext, options: dict[str, Any]) -> DialogTurnResult:
        prompt_options = options.get("prompt_options")
        if not isinstance(prompt_options, PromptOptions):
            raise TypeError(f"{self!r} must be started with PromptOptions")

        frame = _active_frame(dc)
        frame.state["attempts"] = 0

        await self.on_prompt(dc, prompt_options, is_retry=False)
        return DialogTurnResult.waiting()

    async def continue_dialog(self, dc: DialogContext) -> DialogTurnResult:
        frame = _active_frame(dc)
        prompt_options: PromptOptions = frame.options["prompt_options"]

        value = self.recognize(dc.context.text)
        if value is _NOT_RECOGNIZED:
            frame.state["attempts"] = frame.state.get("attempts", 0) + 1
            logger.info(
                f"'{self.id}' could not validate {dc.context.text!r} "
                f"(attempt {frame.state['attempts']}), re-prompting"
            )
            await self.on_prompt(dc, prompt_options, is_retry=True)
            return DialogTurnResult.waiting()

        return await dc.end_dialog(value)

    async def resume_dialog(self, dc: DialogContext, result: Any = None) -> DialogTurnResult:
        # A prompt never starts children; if something did, ask again.
        frame = _active_frame(dc)
        await self.on_prompt(dc, frame.options["prompt_options"], is_retry=False)
        return DialogTurnResult.waiting()

    async def on_prompt(self, dc: DialogContext, options: PromptOptions, is_retry: bool) -> None:
        text = options.prompt
        if is_retry:
            text = options.retry_prompt or self.default_retry(options.prompt)
        speak = options.speak if not is_retry and options.speak else text
        await dc.context.send_activity(text, speak, InputHint.EXPECTING_INPUT)

    def default_retry(self, prompt: str) -> str:
        return prompt

    @abstractmethod
    def recognize(self, text: str) -> Any:
        """Return the typed value, or ``_NOT_RECOGNIZED``."""
        ...


class TextPrompt(Prompt):
    """Free text. Any input is valid."""

    def recognize(self, text: str) -> Any:
        return text


class ConfirmPrompt(Prompt):
    """Yes/no. Returns a bool; ambiguous input re-prompts."""

    def __init__(
        self,
        dialog_id: str,
        yes_tokens: Iterable[str] = ("yes", "y", "yeah", "yep", "sure", "ok", "okay", "true"),
        no_tokens: Iterable[str] = ("no", "n", "nope", "nah", "false"),
        retry_template: str = "{prompt} (yes or no)",
    ):
        super().__init__(dialog_id)
        self.yes_tokens = frozenset(t.lower() for t in yes_tokens)
        self.no_tokens = frozenset(t.lower() for t in no_tokens)
        self.retry_template = retry_template

    def recognize(self, text: str) -> Any:
        return recognize_boolean(text, self.yes_tokens, self.no_tokens)

    def default_retry(self, prompt: str) -> str:
        return self.retry_template.format(prompt=prompt)


_NEGATORS = frozenset({"not", "never", "neither", "nor"})


def _is_negator(word: str) -> bool:
    return word in _NEGATORS or word.endswith("n't")


def recognize_boolean(text: str, yes_tokens: frozenset[str], no_tokens: frozenset[str]) -> Any:
    """Map an utterance to True/False by keyword, or ``_NOT_RECOGNIZED``.

    Both or neither kind of token present counts as ambiguous. A yes-token
    alongside a negator ("not sure", "that isn't correct") never confirms.
    """
    normalized = (text or "").lower().replace("’", "'")
    words = {w.strip("'") for w in re.findall(r"[a-z']+", normalized)}
    said_yes = bool(words & yes_tokens)
    said_no = bool(words & no_tokens)
    if said_yes and any(_is_negator(w) for w in words):
        return _NOT_RECOGNIZED
    if said_yes == said_no:
        return _NOT_RECOGNIZED
    return said_yes
