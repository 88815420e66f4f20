"""Default state key names for LangGraph integration."""

# Standard state keys used by sentencesplit nodes
TEXT = "text"
SENTENCES = "sentences"
