"""Dialogue understanding: intent recognition for course questions."""

from coursebot.du.models import IntentResult, module_entities
from coursebot.du.recognizer import IntentClassifier, IntentRecognizer, ModuleQueryRecognizer

__all__ = [
    "IntentResult",
    "IntentClassifier",
    "IntentRecognizer",
    "ModuleQueryRecognizer",
    "module_entities",
]
