"""LangGraph node factories for sentence splitting."""

from langchain_core.runnables import RunnableLambda
from ...core.abc import Segmenter
from .state_keys import TEXT, SENTENCES


def make_split_node(segmenter: Segmenter, text_key: str = TEXT,
                    sentences_key: str = SENTENCES):
    """
    Create a LangGraph node that splits a state text field into sentences.

    Args:
        segmenter: Any Segmenter, usually a SentenceSplitter
        text_key: State key containing the text to split
        sentences_key: State key the sentence list is written to

    Returns:
        RunnableLambda: Node that adds the sentence list to state
    """
    def _split_text(state):
        text = state.get(text_key, "")
        return {sentences_key: segmenter.segment(text)}

    return RunnableLambda(_split_text)
