"""CourseBot: wires config, recognizer and dialogs, and runs one turn per message."""

from coursebot.config.models import CourseBotConfig
from coursebot.core.message_sink import MessageSink
from coursebot.core.turn import TurnContext
from coursebot.core.types import DialogTurnResult
from coursebot.dialogs.main_dialog import MainDialog
from coursebot.dialogs.module_dialog import ModuleDialog
from coursebot.du.recognizer import IntentRecognizer, ModuleQueryRecognizer
from coursebot.observability.logging import ContextLogger
from coursebot.runtime.conversation_manager import ConversationManager

context_logger = ContextLogger(__name__)


class CourseBot:
    """Host-facing entry point.

    The host must not run two turns of the same conversation at once.
    """

    def __init__(self, dialog: MainDialog, conversations: ConversationManager | None = None):
        self.dialog = dialog
        self.conversations = conversations or ConversationManager()

    async def on_message(
        self, conversation_id: str, text: str, sink: MessageSink
    ) -> DialogTurnResult:
        """Run the dialog for one inbound message and save the state."""
        log = context_logger.with_context(conversation_id=conversation_id)
        log.info("Running dialog with message activity.")

        turn = TurnContext(conversation_id=conversation_id, text=text, sink=sink)
        try:
            result = await self.dialog.run(turn, self.conversations)
        except Exception as e:
            # A half-run turn leaves the stack mid-step; start the next turn clean.
            log.error(f"Turn failed: {e}", exc_info=True)
            await self.conversations.reset(conversation_id)
            raise

        state = await self.conversations.get_or_create_state(conversation_id)
        await self.conversations.save_state(conversation_id, state)
        log.debug(f"Turn finished: {result.status.value}, {turn.sent_count} message(s) sent")
        return result


def create_bot(
    config: CourseBotConfig | None = None,
    recognizer: IntentRecognizer | None = None,
    conversations: ConversationManager | None = None,
) -> CourseBot:
    """Build a CourseBot from config.

    Args:
        config: Bot configuration, defaults when omitted.
        recognizer: Override the recognizer built from ``config.recognizer``.
        conversations: State store, in-memory when omitted.
    """
    config = config or CourseBotConfig()
    if recognizer is None:
        recognizer = ModuleQueryRecognizer(config.recognizer)

    module_dialog = ModuleDialog(messages=config.messages, confirmation=config.confirmation)
    main_dialog = MainDialog(
        recognizer, module_dialog, messages=config.messages, course=config.course
    )
    return CourseBot(main_dialog, conversations)
