"""Non-breaking prefix table loading."""

import re
from functools import lru_cache
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from ..core.errors import InvalidLanguageCode, PrefixFileNotFound, PrefixFileReadError
from ..core.types import PrefixKind, PrefixTable

DATA_DIR = Path(__file__).parent / "data"

NUMERIC_ONLY_MARKER = "#NUMERIC_ONLY#"

_LANGUAGE_CODE_RE = re.compile(r"[a-z][a-z]")


def validate_language_code(language: str) -> str:
    """
    Check that *language* is a two-letter lowercase code.

    Raises:
        InvalidLanguageCode: If the code has any other shape
    """
    if not isinstance(language, str) or not _LANGUAGE_CODE_RE.fullmatch(language):
        raise InvalidLanguageCode(str(language))
    return language


def available_languages() -> List[str]:
    """Language codes that ship with a bundled prefix table."""
    return sorted(p.stem for p in DATA_DIR.glob("*.txt"))


def parse_prefix_lines(lines: Iterable[str]) -> Dict[str, PrefixKind]:
    """
    Parse prefix-file lines into a prefix -> kind mapping.

    Comment lines and blank lines are skipped. The numeric-only marker is
    looked for before the comment tail is cut off.
    """
    prefixes: Dict[str, PrefixKind] = {}
    for line in lines:
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue

        kind = PrefixKind.NUMERIC_ONLY if NUMERIC_ONLY_MARKER in line else PrefixKind.DEFAULT
        prefix = line.split("#", 1)[0].strip()
        if prefix:
            prefixes[prefix] = kind
    return prefixes


def load_prefix_file(path: Union[str, Path], language: Optional[str] = None) -> PrefixTable:
    """
    Load a user-supplied non-breaking prefix file.

    Args:
        path: Path to a UTF-8 prefix file
        language: Language the table is used for (recorded only)

    Returns:
        PrefixTable: Table with source "file"

    Raises:
        PrefixFileNotFound: If the path does not exist
        PrefixFileReadError: If the file cannot be read or decoded
    """
    path = Path(path)

    if not path.exists():
        raise PrefixFileNotFound(str(path))

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise PrefixFileReadError(str(path), e)

    return PrefixTable(
        entries=parse_prefix_lines(content.splitlines()),
        language=language,
        source="file",
        path=str(path),
    )


@lru_cache(maxsize=None)
def bundled_prefix_table(language: str) -> PrefixTable:
    """
    Return the bundled table for *language*, built once per process.

    Unknown languages get an empty table rather than an error.
    """
    validate_language_code(language)
    data_file = DATA_DIR / f"{language}.txt"
    if not data_file.is_file():
        return PrefixTable(language=language, source="empty")

    content = data_file.read_text(encoding="utf-8")
    return PrefixTable(
        entries=parse_prefix_lines(content.splitlines()),
        language=language,
        source="bundled",
        path=str(data_file),
    )


def load_prefix_table(language: str, prefix_file: Optional[Union[str, Path]] = None) -> PrefixTable:
    """
    Build the prefix table a splitter for *language* should use.

    An explicit prefix file takes precedence over the bundled table.

    Raises:
        InvalidLanguageCode: If the language code is malformed
        PrefixFileNotFound: If prefix_file is given but missing
        PrefixFileReadError: If prefix_file is given but unreadable
    """
    validate_language_code(language)
    if prefix_file is not None:
        return load_prefix_file(prefix_file, language=language)
    return bundled_prefix_table(language)
