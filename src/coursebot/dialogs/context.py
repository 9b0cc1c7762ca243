"""Dialog stack management.

``DialogSet`` is the registry of dialogs available to a conversation and
``DialogContext`` is the per-turn view over one conversation's stack. The
stack is flat: prompts, child dialogs and the orchestrator are all frames on
the same list, top = active.
"""

import copy
import logging
from typing import Any

from coursebot.core.errors import DialogStackError
from coursebot.core.turn import TurnContext
from coursebot.core.types import (
    ConversationState,
    DialogInstance,
    DialogTurnResult,
    PromptOptions,
)
from coursebot.dialogs.base import Dialog

logger = logging.getLogger(__name__)


class DialogSet:
    """Registry of dialogs by id."""

    def __init__(self) -> None:
        self._dialogs: dict[str, Dialog] = {}

    def add(self, dialog: Dialog) -> "DialogSet":
        """Register a dialog. Ids must be unique."""
        existing = self._dialogs.get(dialog.id)
        if existing is not None and existing is not dialog:
            raise DialogStackError(f"Duplicate dialog id '{dialog.id}'")
        self._dialogs[dialog.id] = dialog
        return self

    def find(self, dialog_id: str) -> Dialog | None:
        return self._dialogs.get(dialog_id)

    def __contains__(self, dialog_id: str) -> bool:
        return dialog_id in self._dialogs

    def create_context(self, turn: TurnContext, state: ConversationState) -> "DialogContext":
        """Bind this set to one turn and one conversation's state."""
        return DialogContext(self, turn, state)


class DialogContext:
    """Per-turn operations over a conversation's dialog stack."""

    def __init__(self, dialogs: DialogSet, turn: TurnContext, state: ConversationState):
        self.dialogs = dialogs
        self.context = turn
        self.state = state

    @property
    def stack(self) -> list[DialogInstance]:
        return self.state.dialog_stack

    @property
    def active_dialog(self) -> DialogInstance | None:
        """The frame receiving the next input, or None for an empty stack."""
        return self.stack[-1] if self.stack else None

    def find_dialog(self, dialog_id: str) -> Dialog:
        dialog = self.dialogs.find(dialog_id)
        if dialog is None:
            raise DialogStackError(f"Dialog '{dialog_id}' not found in dialog set")
        return dialog

    async def begin_dialog(
        self, dialog_id: str, options: dict[str, Any] | None = None
    ) -> DialogTurnResult:
        """Push a frame for ``dialog_id`` and start it.

        Options are deep-copied so the child never aliases the caller's bag.
        """
        dialog = self.find_dialog(dialog_id)
        frame_options = copy.deepcopy(options) if options is not None else {}
        self.stack.append(DialogInstance(dialog_id=dialog_id, options=frame_options))
        logger.debug(f"begin '{dialog_id}' (depth={len(self.stack)})")
        return await dialog.begin_dialog(self, frame_options)

    async def prompt(self, dialog_id: str, options: PromptOptions) -> DialogTurnResult:
        """Begin a prompt dialog."""
        return await self.begin_dialog(dialog_id, {"prompt_options": options})

    async def continue_dialog(self) -> DialogTurnResult:
        """Route the current input to the active dialog."""
        active = self.active_dialog
        if active is None:
            return DialogTurnResult.empty()
        dialog = self.find_dialog(active.dialog_id)
        return await dialog.continue_dialog(self)

    async def end_dialog(self, result: Any = None) -> DialogTurnResult:
        """Pop the active frame and resume its parent with ``result``.

        On an empty stack this is a no-op returning EMPTY.
        """
        if not self.stack:
            return DialogTurnResult.empty()

        popped = self.stack.pop()
        logger.debug(f"end '{popped.dialog_id}' (depth={len(self.stack)})")

        parent = self.active_dialog
        if parent is None:
            return DialogTurnResult.complete(result)

        dialog = self.find_dialog(parent.dialog_id)
        return await dialog.resume_dialog(self, result)

    async def replace_dialog(
        self, dialog_id: str, options: dict[str, Any] | None = None
    ) -> DialogTurnResult:
        """Pop the active frame and begin ``dialog_id`` in its place.

        The parent is not resumed.
        """
        if self.stack:
            popped = self.stack.pop()
            logger.debug(f"replace '{popped.dialog_id}' with '{dialog_id}'")
        return await self.begin_dialog(dialog_id, options)

    async def cancel_all_dialogs(self) -> DialogTurnResult:
        """Pop every frame down to the root."""
        if self.stack:
            logger.info(f"Cancelling {len(self.stack)} dialog(s)")
            self.stack.clear()
        return DialogTurnResult.cancelled()
