"""Dialog stack, waterfall dialogs, prompts and the course dialogs built on them."""

from coursebot.dialogs.base import Dialog
from coursebot.dialogs.context import DialogContext, DialogSet
from coursebot.dialogs.interruption import continue_with_interruptions, interrupt
from coursebot.dialogs.main_dialog import MAIN_DIALOG, MainDialog
from coursebot.dialogs.module_dialog import MODULE_DIALOG, ModuleDialog
from coursebot.dialogs.prompts import ConfirmPrompt, Prompt, TextPrompt
from coursebot.dialogs.waterfall import WaterfallDialog, WaterfallStepContext

__all__ = [
    "Dialog",
    "DialogContext",
    "DialogSet",
    "WaterfallDialog",
    "WaterfallStepContext",
    "Prompt",
    "TextPrompt",
    "ConfirmPrompt",
    "interrupt",
    "continue_with_interruptions",
    "MainDialog",
    "MAIN_DIALOG",
    "ModuleDialog",
    "MODULE_DIALOG",
]
