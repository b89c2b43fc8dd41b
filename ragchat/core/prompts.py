"""
Prompt templates for the intent classifier and the answer generator.

The classifier prompt is a fixed few-shot instruction keyed only on the
literal `[update]` tag. The answer prompt carries the grounding rules:
context only, most recent timestamp wins, a fixed refusal sentence, and no
source or timestamp in the answer.

Dependencies: langchain_core.prompts
System role: Prompt templates for the conversational core
"""

from langchain_core.prompts import PromptTemplate

UPDATE_TAG = "[update]"

INSUFFICIENT_INFORMATION = "I don't have enough information to answer that question."

INTENT_PROMPT = PromptTemplate.from_template(
    """You are a precise intent classifier. Your task is to classify the user's intent based on a specific tag.
You must follow these rules strictly:
1. If the input text contains the exact tag '[update]', you MUST respond with 'update'.
2. For any other input, you MUST respond with 'query'.

This is a classification task. Do not interpret the meaning of the words; only check for the presence of the '[update]' tag.
Respond with a single word and nothing else.

Here are some examples:

Input: [update] The project deadline is tomorrow.
Output: update

Input: Can you update me on the project status?
Output: query

Input: What is the project status?
Output: query

Input: [update] New team member: John Doe.
Output: update

Now, classify the following input.

Input: {question}
Output:"""
)

ANSWER_PROMPT = PromptTemplate.from_template(
    """You are an information retrieval (RAG) assistant. Your only job is to answer questions from the supplied context.
Analyse the 'Context' below and answer the user's 'Question' precisely and concisely.

You MUST follow these rules:
1. Base your answer STRICTLY on the 'Context'. Do not use any prior knowledge.
2. The context may contain items from different sources with different timestamps. If items conflict, the item with the MOST RECENT timestamp is correct and takes priority.
3. If the answer cannot be found in the 'Context', reply EXACTLY with: "{insufficient_information}" Do not guess.
4. NEVER mention the source or the timestamp of any item in your final answer. The answer must be clean.
5. Be direct and objective.

Context:
---
{context}
---

Question: {question}"""
)


def format_context_item(source: str, timestamp: str, content: str) -> str:
    """Render one context chunk with its provenance header."""
    return f"Source: {source} - Timestamp: {timestamp}\n{content}"
