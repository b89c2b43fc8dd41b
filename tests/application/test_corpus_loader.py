"""
Test suite for CorpusLoader.

System role: Verification of startup ingestion source
"""

from datetime import datetime

import pytest

from ragchat.application.corpus_loader import CorpusLoader
from ragchat.core.exceptions import IngestionError


class TestCorpusLoader:
    """Reading the corpus file."""

    def test_load_reads_content_and_stamps_metadata(self, temp_corpus) -> None:
        document = CorpusLoader().load(temp_corpus)

        assert document.content == temp_corpus.read_text(encoding="utf-8")
        assert document.metadata.source == str(temp_corpus)
        assert isinstance(document.metadata.parsed_timestamp, datetime)

    def test_custom_source_identifier(self, temp_corpus) -> None:
        document = CorpusLoader().load(temp_corpus, source="company-handbook")

        assert document.metadata.source == "company-handbook"

    def test_missing_file_raises_ingestion_error(self, tmp_path) -> None:
        missing = tmp_path / "nope.txt"

        with pytest.raises(IngestionError) as exc_info:
            CorpusLoader().load(missing)

        assert exc_info.value.details["path"] == str(missing)

    def test_undecodable_file_raises_ingestion_error(self, tmp_path) -> None:
        corpus = tmp_path / "binary.txt"
        corpus.write_bytes(b"\xff\xfe\xfa invalid utf-8")

        with pytest.raises(IngestionError) as exc_info:
            CorpusLoader().load(corpus)

        assert exc_info.value.details["error_type"] == "UnicodeDecodeError"
