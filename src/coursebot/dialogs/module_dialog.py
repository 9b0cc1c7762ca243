"""Module-query dialog: find out which course module the user means and confirm it."""

import logging
from collections.abc import Mapping

from coursebot.config.models import ConfirmationConfig, MessagesConfig
from coursebot.core.types import DialogTurnResult, PromptOptions
from coursebot.dialogs.context import DialogSet
from coursebot.dialogs.prompts import ConfirmPrompt, TextPrompt
from coursebot.dialogs.waterfall import WaterfallDialog, WaterfallStepContext
from coursebot.du.models import MODULE_TYPE_ENTITY

logger = logging.getLogger(__name__)

MODULE_DIALOG = "module_dialog"
MODULE_TEXT_PROMPT = "module_dialog.text_prompt"
MODULE_CONFIRM_PROMPT = "module_dialog.confirm_prompt"


class ModuleDialog(WaterfallDialog):
    """AwaitingType -> AwaitingConfirmation -> Terminal.

    Options: ``{"type": {"module_type": str | None}}``. Ends with the filled
    options (``{"type": "<module>"}``) when confirmed, None when declined.
    """

    def __init__(
        self,
        dialog_id: str = MODULE_DIALOG,
        messages: MessagesConfig | None = None,
        confirmation: ConfirmationConfig | None = None,
    ):
        super().__init__(dialog_id)
        self.messages = messages or MessagesConfig()
        confirmation = confirmation or ConfirmationConfig()

        self.text_prompt = TextPrompt(MODULE_TEXT_PROMPT)
        self.confirm_prompt = ConfirmPrompt(
            MODULE_CONFIRM_PROMPT,
            yes_tokens=confirmation.yes_tokens,
            no_tokens=confirmation.no_tokens,
            retry_template=confirmation.retry_template,
        )
        self.steps = [
            self._make_module_step(),
            self._make_confirm_step(),
            self._make_final_step(),
        ]

    def register(self, dialogs: DialogSet) -> DialogSet:
        """Add this dialog and its prompts to ``dialogs``."""
        return dialogs.add(self).add(self.text_prompt).add(self.confirm_prompt)

    def _make_module_step(self):
        messages = self.messages

        async def module_step(step: WaterfallStepContext) -> DialogTurnResult:
            """If a module type has not been provided, prompt for one."""
            details = step.options.get("type")
            module_type = details.get(MODULE_TYPE_ENTITY) if isinstance(details, Mapping) else None

            if not module_type:
                return await step.prompt(
                    MODULE_TEXT_PROMPT,
                    PromptOptions(prompt=messages.module_prompt),
                )
            logger.debug(f"Module type pre-filled: {module_type!r}")
            return await step.next(module_type)

        return module_step

    def _make_confirm_step(self):
        messages = self.messages

        async def confirm_step(step: WaterfallStepContext) -> DialogTurnResult:
            """Confirm the module the user gave."""
            step.options["type"] = step.result
            text = messages.confirm_template.format(module=step.result)
            return await step.prompt(MODULE_CONFIRM_PROMPT, PromptOptions(prompt=text))

        return confirm_step

    def _make_final_step(self):
        async def final_step(step: WaterfallStepContext) -> DialogTurnResult:
            if step.result is True:
                return await step.end_dialog(step.options)
            logger.info("Module not confirmed")
            return await step.end_dialog()

        return final_step
