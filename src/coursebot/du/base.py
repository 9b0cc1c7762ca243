"""Helpers for turning raw DSPy predictions into validated models."""

import logging
from collections.abc import Callable
from typing import Any, TypeVar, cast

from pydantic import BaseModel, ValidationError

T = TypeVar("T", bound=BaseModel)

logger = logging.getLogger(__name__)


def validate_dspy_result(result: Any, model_class: type[T]) -> T:
    """Validate and convert DSPy result to strict Pydantic model.

    Handles various return formats from DSPy:
    - Already correct model instance
    - Dict
    - Anything exposing model_dump()
    """
    if result is None:
        raise TypeError(f"Cannot validate None result against {model_class.__name__}")

    if isinstance(result, model_class):
        return result

    if isinstance(result, dict):
        return cast(T, model_class.model_validate(result))

    if hasattr(result, "model_dump") and callable(result.model_dump):
        return cast(T, model_class.model_validate(result.model_dump()))

    raise TypeError(f"Cannot convert result of type {type(result)} to {model_class.__name__}")


def safe_extract_result(
    result: Any,
    model_class: type[T],
    default_factory: Callable[[], T],
    context: str = "Extraction",
) -> T:
    """Extract result with fallback when the model output does not validate.

    Only malformed output falls back; errors from the LM call itself are
    raised before this is reached.
    """
    try:
        return validate_dspy_result(result, model_class)
    except (ValidationError, TypeError) as e:
        logger.warning(f"{context} validation failed: {e}. Falling back to default.")
        return default_factory()
