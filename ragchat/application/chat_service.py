"""
Chat service.

Composition root for the conversational core: builds the chunker, vector
index, classifier, updater, retriever, generator and orchestrator, ingests
the corpus and answers turns.

Dependencies: ragchat.core, ragchat.boundary, ragchat.configs
System role: Application service behind the interactive shell
"""

import logging
from pathlib import Path

from langchain_core.embeddings import Embeddings
from langchain_core.runnables import Runnable

from ragchat.application.corpus_loader import CorpusLoader
from ragchat.boundary.llm.model_factory import get_chat_model, get_embeddings
from ragchat.boundary.vdb.memory_vector_store import InMemoryVectorIndex
from ragchat.configs.settings import Settings
from ragchat.core.chunker import TextChunker
from ragchat.core.generator import AnswerGenerator
from ragchat.core.intent_classifier import IntentClassifier
from ragchat.core.orchestrator import TurnOrchestrator
from ragchat.core.retriever import DEFAULT_TOP_K, Retriever
from ragchat.core.updater import KnowledgeUpdater
from ragchat.models.turn_state import TurnState

logger = logging.getLogger(__name__)


class ChatService:
    """Retrieval-augmented chat over a single in-process corpus."""

    def __init__(
        self,
        llm: Runnable,
        embeddings: Embeddings,
        corpus_path: str | Path,
        corpus_source: str | None = None,
        chunk_size: int = 1000,
        chunk_overlap: int = 200,
        top_k: int = DEFAULT_TOP_K,
        loader: CorpusLoader | None = None,
    ) -> None:
        """
        Wire the conversational core.

        Args:
            llm: Language model (temperature 0)
            embeddings: Embedding service for the vector index
            corpus_path: Text corpus loaded by prepare()
            corpus_source: Source identifier for corpus chunks (defaults to path)
            chunk_size: Chunk size shared by ingestion and updates
            chunk_overlap: Chunk overlap shared by ingestion and updates
            top_k: Number of chunks retrieved per question
            loader: Corpus loader (default UTF-8 file loader)

        Raises:
            InvalidConfig: chunk_overlap >= chunk_size
        """
        self._corpus_path = corpus_path
        self._corpus_source = corpus_source
        self._loader = loader or CorpusLoader()

        self.chunker = TextChunker(chunk_size=chunk_size, chunk_overlap=chunk_overlap)
        self.index = InMemoryVectorIndex(embeddings)
        self.orchestrator = TurnOrchestrator(
            classifier=IntentClassifier(llm),
            updater=KnowledgeUpdater(self.index, self.chunker),
            retriever=Retriever(self.index, top_k=top_k),
            generator=AnswerGenerator(llm),
        )

    @classmethod
    def from_settings(cls, settings: Settings, corpus_path: str | None = None) -> "ChatService":
        """
        Build the service with model backends selected by configuration.

        Args:
            settings: Application settings
            corpus_path: Optional override of the configured corpus path

        Returns:
            ChatService: Unprepared service
        """
        return cls(
            llm=get_chat_model(settings.llm),
            embeddings=get_embeddings(settings.embedding),
            corpus_path=corpus_path or settings.chat.corpus_path,
            corpus_source=settings.chat.corpus_source,
            chunk_size=settings.vector_store.chunk_size,
            chunk_overlap=settings.vector_store.chunk_overlap,
            top_k=settings.vector_store.top_k,
        )

    async def prepare(self) -> int:
        """
        Load, chunk and index the corpus.

        Returns:
            int: Number of corpus chunks indexed

        Raises:
            IngestionError: Corpus could not be read
            IndexingError: Corpus chunks could not be embedded
        """
        document = self._loader.load(self._corpus_path, source=self._corpus_source)
        chunks = self.chunker.split(document)
        logger.info(f"{__name__}:prepare - Corpus split into {len(chunks)} chunks")

        indexed = await self.index.insert(chunks)
        logger.info(f"{__name__}:prepare - Corpus indexed entries={indexed}")
        return indexed

    async def run_turn(self, question: str) -> TurnState:
        """Run one turn and return its full state."""
        return await self.orchestrator.run(question)

    async def ask(self, question: str) -> str:
        """Run one turn and return the answer text."""
        return await self.orchestrator.ask(question)
