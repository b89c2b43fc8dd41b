"""
Turn orchestrator.

A minimal finite state machine that sequences one conversational turn:

    START -> classify_intent
    classify_intent -> update      (intent == update)
    classify_intent -> retrieve    (intent == query)
    retrieve -> generate
    generate -> END, update -> END

Each node assigns only the TurnState fields it owns. Nodes run one at a
time; a failing node aborts the turn, which is reported to the user as a
turn-level failure. Turns are serialised so an update never interleaves
with a query against the shared index.

Dependencies: asyncio, ragchat.core components, ragchat.observability
System role: Per-turn orchestration of the conversational core
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from enum import Enum

from ragchat.core.exceptions import RoutingError
from ragchat.core.generator import AnswerGenerator
from ragchat.core.intent_classifier import IntentClassifier
from ragchat.core.retriever import Retriever
from ragchat.core.updater import KnowledgeUpdater
from ragchat.models.turn_state import Intent, TurnState
from ragchat.observability.correlation import clear_turn_id, set_turn_id
from ragchat.observability.log_utils import safe_log_value

logger = logging.getLogger(__name__)

TURN_FAILED_MESSAGE = "Sorry, something went wrong while handling your message. Please try again."


class Node(str, Enum):
    """States of the turn state machine."""

    START = "__start__"
    CLASSIFY_INTENT = "classify_intent"
    UPDATE = "update"
    RETRIEVE = "retrieve"
    GENERATE = "generate"
    END = "__end__"


# Unconditional edges
EDGES: dict[Node, Node] = {
    Node.START: Node.CLASSIFY_INTENT,
    Node.RETRIEVE: Node.GENERATE,
    Node.GENERATE: Node.END,
    Node.UPDATE: Node.END,
}

# Conditional edge out of CLASSIFY_INTENT, keyed by TurnState.intent
INTENT_ROUTES: dict[Intent, Node] = {
    Intent.UPDATE: Node.UPDATE,
    Intent.QUERY: Node.RETRIEVE,
}


def next_node(node: Node, state: TurnState) -> Node:
    """
    Resolve the transition out of a node.

    Raises:
        RoutingError: No edge applies (e.g. intent still unset)
    """
    if node is Node.CLASSIFY_INTENT:
        try:
            return INTENT_ROUTES[state.intent]
        except KeyError:
            raise RoutingError(node.value, intent=state.intent.value) from None
    try:
        return EDGES[node]
    except KeyError:
        raise RoutingError(node.value) from None


class TurnOrchestrator:
    """Run user turns through the state machine."""

    def __init__(
        self,
        classifier: IntentClassifier,
        updater: KnowledgeUpdater,
        retriever: Retriever,
        generator: AnswerGenerator,
    ) -> None:
        self._classifier = classifier
        self._updater = updater
        self._retriever = retriever
        self._generator = generator
        self._lock = asyncio.Lock()
        self._handlers: dict[Node, Callable[[TurnState], Awaitable[None]]] = {
            Node.CLASSIFY_INTENT: self._classify_intent,
            Node.UPDATE: self._update,
            Node.RETRIEVE: self._retrieve,
            Node.GENERATE: self._generate,
        }

    async def run(self, question: str) -> TurnState:
        """
        Execute one turn end to end.

        Args:
            question: Raw user input

        Returns:
            TurnState: Final state; `answer` is always set
        """
        async with self._lock:
            state = TurnState(question=question, turn_id=set_turn_id())
            logger.info(
                f"{__name__}:run - START question={safe_log_value(question)}"
            )
            path: list[str] = []
            try:
                node = next_node(Node.START, state)
                while node is not Node.END:
                    path.append(node.value)
                    await self._handlers[node](state)
                    node = next_node(node, state)
            except Exception as e:
                logger.exception(
                    f"{__name__}:run - Turn FAILED at {path[-1] if path else Node.START.value} "
                    f"- {type(e).__name__}: {e}"
                )
                state.error = f"{type(e).__name__}: {e}"
                state.answer = TURN_FAILED_MESSAGE
            else:
                logger.info(f"{__name__}:run - END path={' -> '.join(path)}")
            finally:
                clear_turn_id()
            return state

    async def ask(self, question: str) -> str:
        """Run a turn and return only its answer."""
        state = await self.run(question)
        return state.answer or ""

    # Nodes

    async def _classify_intent(self, state: TurnState) -> None:
        result = await self._classifier.classify(state.question)
        state.intent = result.intent
        state.update_info = result.update_info

    async def _update(self, state: TurnState) -> None:
        state.answer = await self._updater.apply(state.update_info)

    async def _retrieve(self, state: TurnState) -> None:
        state.context = await self._retriever.retrieve(state.question)

    async def _generate(self, state: TurnState) -> None:
        state.answer = await self._generator.generate(state.question, state.context)
