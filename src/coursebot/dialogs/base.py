"""Dialog base class."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from coursebot.core.types import DialogTurnResult

if TYPE_CHECKING:
    from coursebot.dialogs.context import DialogContext


class Dialog(ABC):
    """Something that can sit on the dialog stack.

    Subclasses implement ``begin_dialog``; the defaults for continuing and
    resuming end the dialog, passing through the child's result.
    """

    def __init__(self, dialog_id: str):
        if not dialog_id:
            raise ValueError("dialog_id is required")
        self.id = dialog_id

    @abstractmethod
    async def begin_dialog(self, dc: "DialogContext", options: dict[str, Any]) -> DialogTurnResult:
        """Start the dialog. Its frame is already on top of the stack."""
        ...

    async def continue_dialog(self, dc: "DialogContext") -> DialogTurnResult:
        """Handle a new input event while this dialog is active."""
        return await dc.end_dialog()

    async def resume_dialog(self, dc: "DialogContext", result: Any = None) -> DialogTurnResult:
        """Called when a child this dialog started has ended."""
        return await dc.end_dialog(result)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.id!r})"
