"""
Intent classifier.

Labels a user turn as `query` or `update` with one deterministic call to the
language model using a fixed few-shot prompt, and extracts the update
payload for tagged inputs.

Dependencies: langchain_core.runnables, ragchat.core.prompts
System role: First node of the turn state machine
"""

import logging
from typing import NamedTuple

from langchain_core.runnables import Runnable

from ragchat.boundary.llm.model_factory import completion_text
from ragchat.core.exceptions import ClassificationAmbiguity
from ragchat.core.prompts import INTENT_PROMPT, UPDATE_TAG
from ragchat.models.turn_state import Intent
from ragchat.observability.log_utils import safe_log_value

logger = logging.getLogger(__name__)

FALLBACK_INTENT = Intent.QUERY


class IntentResult(NamedTuple):
    """Classifier output."""

    intent: Intent
    update_info: str | None


def normalize_label(completion: str) -> Intent:
    """
    Map a raw completion to an intent.

    Args:
        completion: Raw model output

    Returns:
        Intent: QUERY or UPDATE

    Raises:
        ClassificationAmbiguity: Output is neither label after trim/casefold
    """
    label = completion.strip().casefold()
    if label == Intent.QUERY.value:
        return Intent.QUERY
    if label == Intent.UPDATE.value:
        return Intent.UPDATE
    raise ClassificationAmbiguity(completion)


def extract_update_info(question: str) -> str | None:
    """
    Strip the update tag from a question.

    Returns None when the tag is absent or nothing remains after removing it.
    """
    if UPDATE_TAG not in question:
        return None
    remainder = question.replace(UPDATE_TAG, "", 1).strip()
    return remainder or None


class IntentClassifier:
    """Thin wrapper over the language model's classification completion."""

    def __init__(self, llm: Runnable) -> None:
        """
        Initialize classifier.

        Args:
            llm: Language model (temperature 0) invoked with a prompt string
        """
        self._llm = llm

    async def classify(self, question: str) -> IntentResult:
        """
        Classify a user turn.

        Unrecognised completions fall back to `query` and are logged.

        Args:
            question: Raw user input

        Returns:
            IntentResult: Intent and, for updates, the payload without the tag
        """
        prompt = INTENT_PROMPT.format(question=question)
        response = await self._llm.ainvoke(prompt)
        completion = completion_text(response)

        try:
            intent = normalize_label(completion)
        except ClassificationAmbiguity as e:
            logger.warning(
                f"{__name__}:classify - {e}; falling back to '{FALLBACK_INTENT.value}'"
            )
            intent = FALLBACK_INTENT

        logger.info(f"{__name__}:classify - Intent: {intent.value}")

        if intent is not Intent.UPDATE:
            return IntentResult(intent=intent, update_info=None)

        update_info = extract_update_info(question)
        if update_info is None:
            logger.warning(
                f"{__name__}:classify - Update intent without usable payload "
                f"question={safe_log_value(question)}"
            )
        return IntentResult(intent=intent, update_info=update_info)
