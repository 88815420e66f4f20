"""Deterministic sentence splitter driven by non-breaking prefix tables."""

import re
import unicodedata
from pathlib import Path
from typing import List, Optional, Union

import regex

from ..core.abc import Logger
from ..core.errors import PatternError
from ..core.types import PrefixKind, PrefixTable
from ..prefixes.loader import load_prefix_table


def _compile(pattern: str, module=re):
    try:
        return module.compile(pattern)
    except (re.error, regex.error) as e:
        raise PatternError(pattern, e)


# Unicode White_Space only; \x1c-\x1f are not separators here
WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)

_WHITESPACE_RUN_RE = _compile(r"\p{White_Space}{2,}", module=regex)
_LAST_WORD_RE = _compile(r"\P{White_Space}*\Z", module=regex)
# Uppercase run ending in a dot, anywhere in the fragment (".NATO.", " U.")
_ACRONYM_RE = _compile(r"(?:^|\p{White_Space})\.?[\p{Lu}\-]+\.", module=regex)

TERMINATORS = ".?!"
QUOTE = '"'
STARTER_PUNCTUATION = '"(«'


def _is_numeric(ch: str) -> bool:
    return unicodedata.category(ch) in ("Nd", "Nl", "No")


def _is_sentence_starter(ch: str) -> bool:
    return ch.isupper() or _is_numeric(ch) or ch in STARTER_PUNCTUATION


class SentenceSplitter:
    """
    Rule-based sentence splitter.

    Scans the text once, left to right. At every terminator it looks at the
    next non-space character and at the last word of the current fragment to
    decide whether a sentence ends there.
    """

    def __init__(self, language: str = "en",
                 prefix_file: Optional[Union[str, Path]] = None, *,
                 logger: Optional[Logger] = None):
        """
        Initialize splitter and build its prefix table.

        Args:
            language: Two-letter lowercase language code
            prefix_file: Optional prefix file overriding the bundled table
            logger: Optional structured logger

        Raises:
            InvalidLanguageCode: If language is not two lowercase letters
            PrefixFileNotFound: If prefix_file does not exist
            PrefixFileReadError: If prefix_file cannot be read
        """
        self.language = language
        self.log = logger
        self.prefixes: PrefixTable = load_prefix_table(language, prefix_file)

        if self.log:
            if self.prefixes.source == "empty":
                self.log.warn("no_bundled_prefixes", language=language)
            self.log.info("prefix_table_loaded",
                          language=language,
                          source=self.prefixes.source,
                          entries=len(self.prefixes))

    @classmethod
    def from_config(cls, config, logger: Optional[Logger] = None) -> "SentenceSplitter":
        """Build a splitter from a SplitterConfig."""
        return cls(config.language, config.prefix_file, logger=logger)

    def split(self, text: str) -> List[str]:
        """
        Split text into sentences.

        Args:
            text: Input text

        Returns:
            List[str]: Trimmed, non-empty sentences in input order
        """
        if not text:
            return []

        text = _WHITESPACE_RUN_RE.sub(" ", text).strip(WHITESPACE)
        chars = text + " "  # trailing sentinel, never emitted
        end = len(chars) - 1

        sentences = []
        current = ""
        in_quotes = False
        quote_char = None

        i = 0
        while i < end:
            c = chars[i]
            current += c

            if c == QUOTE:
                if not in_quotes:
                    in_quotes = True
                    quote_char = c
                elif c == quote_char:
                    in_quotes = False

            closes_paren = c == ")" and i > 0 and chars[i - 1] in TERMINATORS
            if c in TERMINATORS or closes_paren:
                next_idx = i + 1
                while next_idx < len(chars) and chars[next_idx] in WHITESPACE:
                    next_idx += 1

                # The acronym may continue right after the terminator (" .NATO.")
                word_end = i + 1
                while word_end < len(chars) and chars[word_end] not in WHITESPACE:
                    word_end += 1

                if _ACRONYM_RE.search(current + chars[i + 1:word_end]):
                    i += 1
                    continue

                if next_idx < len(chars) and self._is_boundary(
                        chars, i, chars[next_idx], current, in_quotes, closes_paren):
                    sentences.append(current.strip(WHITESPACE))
                    current = ""
                    i = next_idx - 1
            i += 1

        if current:
            sentences.append(current.strip(WHITESPACE))

        return [s for s in sentences if s]

    def segment(self, text: str) -> List[str]:
        """Segmenter protocol entry point; same as split()."""
        return self.split(text)

    def _is_boundary(self, chars: str, i: int, next_char: str, current: str,
                     in_quotes: bool, closes_paren: bool) -> bool:
        if in_quotes:
            return False
        if i > 0 and chars[i - 1] == ")":
            should_split = True
        else:
            should_split = _is_sentence_starter(next_char)

        if should_split:
            word = _LAST_WORD_RE.search(current).group()
            if closes_paren:
                word = word.rstrip(")").lstrip("(")
            kind = self.prefixes.lookup(word.rstrip(TERMINATORS))
            if kind is PrefixKind.DEFAULT:
                should_split = False
            elif kind is PrefixKind.NUMERIC_ONLY:
                should_split = not _is_numeric(next_char)

        return should_split


def split_text_into_sentences(text: str, language: str = "en",
                              prefix_file: Optional[Union[str, Path]] = None) -> List[str]:
    """
    Split text with a throw-away splitter.

    Reuse a SentenceSplitter instead when splitting many texts, so the
    prefix table is only loaded once.
    """
    return SentenceSplitter(language, prefix_file).split(text)
