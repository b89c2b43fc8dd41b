"""
Grounded answer generator.

Builds a single prompt from the retrieved chunks (source, timestamp and text
in retrieval order) and asks the language model for an answer under the
grounding rules in `ragchat.core.prompts`. The semantic judgment, including
the most-recent-timestamp-wins rule, is delegated to the model; the parts
that can be enforced in code are enforced here:

- no context means the fixed insufficient-information sentence, without a
  model call
- source values and timestamp strings from the context are scrubbed from
  the answer
- an answer made up mostly of the insufficient-information sentence is
  normalised to exactly that sentence

Dependencies: langchain_core.runnables, ragchat.core.prompts
System role: Final node of the query branch
"""

import logging
import re
from collections.abc import Sequence

from langchain_core.runnables import Runnable

from ragchat.boundary.llm.model_factory import completion_text
from ragchat.boundary.vdb.vector_schemas import ScoredChunk
from ragchat.core.prompts import (
    ANSWER_PROMPT,
    INSUFFICIENT_INFORMATION,
    format_context_item,
)

logger = logging.getLogger(__name__)


def build_context(context: Sequence[ScoredChunk]) -> str:
    """Render context chunks in retrieval order."""
    return "\n".join(
        format_context_item(item.chunk.source, item.chunk.timestamp, item.chunk.content)
        for item in context
    )


# Share of the answer the insufficient-information sentence must fill to count as a refusal
REFUSAL_SHARE = 2 / 3


def is_refusal(answer: str) -> bool:
    """
    True when the answer is essentially the insufficient-information sentence.

    An answer that also carries real content (e.g. one part of a multi-part
    question answered, the other refused) is not a refusal.
    """
    if INSUFFICIENT_INFORMATION not in answer:
        return False
    return len(INSUFFICIENT_INFORMATION) >= REFUSAL_SHARE * len(answer.strip())


def scrub_metadata(answer: str, context: Sequence[ScoredChunk]) -> str:
    """
    Remove every source value and timestamp string of the context from answer.

    Args:
        answer: Model completion
        context: Context the answer was generated from

    Returns:
        str: Answer without provenance values, whitespace tidied
    """
    # Longest first so a value that contains another is removed whole
    values = sorted(
        {v for item in context for v in (item.chunk.source, item.chunk.timestamp) if v},
        key=len,
        reverse=True,
    )
    cleaned = answer
    for value in values:
        cleaned = cleaned.replace(value, "")
    if cleaned == answer:
        return answer
    cleaned = re.sub(r"\(\s*\)|\[\s*\]", "", cleaned)
    cleaned = re.sub(r"[ \t]{2,}", " ", cleaned)
    cleaned = re.sub(r"[ \t]+([.,;:!?])", r"\1", cleaned)
    return cleaned.strip()


class AnswerGenerator:
    """Answer questions from retrieved context only."""

    def __init__(self, llm: Runnable) -> None:
        """
        Initialize generator.

        Args:
            llm: Language model (temperature 0) invoked with a prompt string
        """
        self._llm = llm

    def build_prompt(self, question: str, context: Sequence[ScoredChunk]) -> str:
        """Format the grounded prompt for a question and its context."""
        return ANSWER_PROMPT.format(
            insufficient_information=INSUFFICIENT_INFORMATION,
            context=build_context(context),
            question=question,
        )

    async def generate(self, question: str, context: Sequence[ScoredChunk]) -> str:
        """
        Produce the final answer.

        Args:
            question: User question
            context: Retrieved chunks, best first

        Returns:
            str: Answer text free of source and timestamp values
        """
        if not context:
            logger.info(f"{__name__}:generate - Empty context, refusing to answer")
            return INSUFFICIENT_INFORMATION

        prompt = self.build_prompt(question, context)
        logger.debug(f"{__name__}:generate - prompt_len={len(prompt)} context={len(context)}")

        response = await self._llm.ainvoke(prompt)
        answer = completion_text(response).strip()

        if is_refusal(answer):
            return INSUFFICIENT_INFORMATION

        cleaned = scrub_metadata(answer, context)
        if cleaned != answer:
            logger.warning(f"{__name__}:generate - Removed source/timestamp values from answer")
        if not cleaned:
            return INSUFFICIENT_INFORMATION

        logger.info(f"{__name__}:generate - answer_len={len(cleaned)}")
        return cleaned
