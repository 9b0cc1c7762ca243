"""Waterfall dialogs: a fixed ordered sequence of async steps."""

import logging
from collections.abc import Sequence
from typing import Any

from coursebot.core.constants import DialogReason, InputHint
from coursebot.core.turn import TurnContext
from coursebot.core.types import DialogInstance, DialogTurnResult, PromptOptions, WaterfallStep
from coursebot.dialogs.base import Dialog
from coursebot.dialogs.context import DialogContext

logger = logging.getLogger(__name__)


class WaterfallStepContext:
    """What a step sees: the frame's options, the previous result and the actions.

    Every action returns a ``DialogTurnResult`` which the step must return.
    """

    def __init__(
        self,
        waterfall: "WaterfallDialog",
        dc: DialogContext,
        frame: DialogInstance,
        index: int,
        reason: DialogReason,
        result: Any = None,
    ):
        self._waterfall = waterfall
        self._dc = dc
        self._frame = frame
        self._next_called = False
        self.index = index
        self.reason = reason
        self.result = result

    @property
    def options(self) -> dict[str, Any]:
        return self._frame.options

    @property
    def context(self) -> TurnContext:
        return self._dc.context

    async def send(
        self,
        text: str,
        speak: str | None = None,
        hint: InputHint = InputHint.ACCEPTING_INPUT,
    ) -> None:
        await self._dc.context.send_activity(text, speak, hint)

    async def prompt(self, dialog_id: str, options: PromptOptions) -> DialogTurnResult:
        return await self._dc.prompt(dialog_id, options)

    async def next(self, result: Any = None) -> DialogTurnResult:
        """Run the following step now, with ``result`` as its ``.result``."""
        if self._next_called:
            raise RuntimeError(
                f"next() called twice in step {self.index} of '{self._waterfall.id}'"
            )
        self._next_called = True
        return await self._waterfall.resume_dialog(self._dc, result, reason=DialogReason.NEXT)

    async def begin_dialog(
        self, dialog_id: str, options: dict[str, Any] | None = None
    ) -> DialogTurnResult:
        return await self._dc.begin_dialog(dialog_id, options)

    async def end_dialog(self, result: Any = None) -> DialogTurnResult:
        return await self._dc.end_dialog(result)

    async def replace_dialog(
        self, dialog_id: str, options: dict[str, Any] | None = None
    ) -> DialogTurnResult:
        return await self._dc.replace_dialog(dialog_id, options)


class WaterfallDialog(Dialog):
    """Runs its steps one at a time, suspending whenever a step prompts."""

    def __init__(self, dialog_id: str, steps: Sequence[WaterfallStep] | None = None):
        super().__init__(dialog_id)
        self.steps: list[WaterfallStep] = list(steps or [])

    def add_step(self, step: WaterfallStep) -> "WaterfallDialog":
        self.steps.append(step)
        return self

    async def begin_dialog(self, dc: DialogContext, options: dict[str, Any]) -> DialogTurnResult:
        return await self._run_step(dc, 0, DialogReason.BEGIN, None)

    async def continue_dialog(self, dc: DialogContext) -> DialogTurnResult:
        # Only reached when a step suspended without a prompt on top.
        return await self.resume_dialog(dc, dc.context.text, reason=DialogReason.CONTINUE)

    async def resume_dialog(
        self,
        dc: DialogContext,
        result: Any = None,
        reason: DialogReason = DialogReason.END,
    ) -> DialogTurnResult:
        frame = dc.active_dialog
        if frame is None:
            return DialogTurnResult.empty()
        return await self._run_step(dc, frame.step_index + 1, reason, result)

    async def _run_step(
        self, dc: DialogContext, index: int, reason: DialogReason, result: Any
    ) -> DialogTurnResult:
        frame = dc.active_dialog
        if frame is None:
            return DialogTurnResult.empty()

        if index >= len(self.steps):
            # Ran off the end: finish with the last step's result.
            return await dc.end_dialog(result)

        frame.step_index = index
        step = self.steps[index]
        logger.debug(f"'{self.id}' step {index} ({getattr(step, '__name__', step)}) [{reason.value}]")
        step_context = WaterfallStepContext(self, dc, frame, index, reason, result)
        return await step(step_context)
