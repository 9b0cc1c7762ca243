"""DSPy signature for intent recognition."""

import dspy

from coursebot.du.models import IntentResult


class RecognizeIntent(dspy.Signature):
    """Classify a student's question about their course.

    Pick exactly one intent from the available intents, or 'None' if nothing
    fits. If the message names a course module (for example 'Algebra' or
    'Geometry'), extract it as the 'module_type' entity, copying the user's
    wording.
    """

    user_message: str = dspy.InputField(desc="The student's message")
    available_intents: list[str] = dspy.InputField(desc="Intent labels to choose from")

    result: IntentResult = dspy.OutputField(desc="Top intent, entities and confidence")
