"""
sentencesplit - Rule-based multilingual sentence splitting.

Splits text on sentence terminators using punctuation heuristics and
per-language tables of non-breaking prefixes. No statistical model involved.
"""

__version__ = "0.1.0"

from .core.errors import (
    SentenceSplitterError,
    InvalidLanguageCode,
    PrefixFileNotFound,
    PrefixFileReadError,
    PatternError,
    ConfigLoadError,
)
from .core.types import PrefixKind, PrefixEntry, PrefixTable
from .prefixes.loader import load_prefix_table, available_languages
from .segmenters.sentence import SentenceSplitter, split_text_into_sentences

__all__ = [
    "SentenceSplitter",
    "split_text_into_sentences",
    "load_prefix_table",
    "available_languages",
    "PrefixKind",
    "PrefixEntry",
    "PrefixTable",
    "SentenceSplitterError",
    "InvalidLanguageCode",
    "PrefixFileNotFound",
    "PrefixFileReadError",
    "PatternError",
    "ConfigLoadError",
]
