"""
Test suite for IntentClassifier.

Tests label normalisation, update payload extraction and the deterministic
fallback for unrecognised completions.

System role: Verification of the classification node
"""

import logging

import pytest
from langchain_core.language_models import FakeListChatModel

from ragchat.core.exceptions import ClassificationAmbiguity
from ragchat.core.intent_classifier import (
    IntentClassifier,
    extract_update_info,
    normalize_label,
)
from ragchat.models.turn_state import Intent


class TestNormalizeLabel:
    """Raw completion to intent mapping."""

    @pytest.mark.parametrize(
        "completion,expected",
        [
            ("query", Intent.QUERY),
            ("update", Intent.UPDATE),
            ("  Update\n", Intent.UPDATE),
            ("QUERY", Intent.QUERY),
        ],
    )
    def test_trimmed_casefolded_labels(self, completion: str, expected: Intent) -> None:
        assert normalize_label(completion) is expected

    @pytest.mark.parametrize("completion", ["", "maybe", "update.", "Output: query"])
    def test_other_completions_are_ambiguous(self, completion: str) -> None:
        with pytest.raises(ClassificationAmbiguity) as exc_info:
            normalize_label(completion)

        assert exc_info.value.completion == completion


class TestExtractUpdateInfo:
    """Update payload extraction."""

    def test_tag_removed_and_trimmed(self) -> None:
        assert extract_update_info("[update] The project deadline is tomorrow.") == (
            "The project deadline is tomorrow."
        )

    def test_only_first_tag_removed(self) -> None:
        assert extract_update_info("[update] use the [update] tag") == "use the [update] tag"

    def test_missing_tag_returns_none(self) -> None:
        assert extract_update_info("Please update me on the project") is None

    def test_tag_only_returns_none(self) -> None:
        assert extract_update_info("   [update]   ") is None


class TestClassify:
    """End-to-end classification with a scripted model."""

    @pytest.mark.asyncio
    async def test_plain_question_is_query(self, classifier_llm) -> None:
        classifier = IntentClassifier(classifier_llm)

        result = await classifier.classify("The project deadline is tomorrow.")

        assert result.intent is Intent.QUERY
        assert result.update_info is None

    @pytest.mark.asyncio
    async def test_tagged_input_is_update(self, classifier_llm) -> None:
        classifier = IntentClassifier(classifier_llm)

        result = await classifier.classify("[update] The project deadline is tomorrow.")

        assert result.intent is Intent.UPDATE
        assert result.update_info == "The project deadline is tomorrow."

    @pytest.mark.asyncio
    async def test_prompt_contains_question(self, llm_factory) -> None:
        seen: list[str] = []

        def reply(prompt: str) -> str:
            seen.append(prompt)
            return "query"

        await IntentClassifier(llm_factory(reply)).classify("Who runs the meeting?")

        assert len(seen) == 1
        assert seen[0].rstrip().endswith("Input: Who runs the meeting?\nOutput:")
        assert "[update]" in seen[0]

    @pytest.mark.asyncio
    async def test_unrecognised_label_falls_back_to_query(self, caplog) -> None:
        classifier = IntentClassifier(FakeListChatModel(responses=["I think this is an update"]))

        with caplog.at_level(logging.WARNING):
            result = await classifier.classify("[update] Lunch is at noon.")

        assert result.intent is Intent.QUERY
        assert result.update_info is None
        assert "falling back" in caplog.text

    @pytest.mark.asyncio
    async def test_update_label_without_tag_has_no_payload(self) -> None:
        classifier = IntentClassifier(FakeListChatModel(responses=["update"]))

        result = await classifier.classify("Can you update me on the status?")

        assert result.intent is Intent.UPDATE
        assert result.update_info is None
