"""Configuration settings for the org_person_extractor package."""
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

import yaml

logger = logging.getLogger(__name__)

# Package directory
PACKAGE_DIR = Path(__file__).parent

# Bundled data directory
DATA_DIR = PACKAGE_DIR / "data"

# Lexicon file (title words and organization keywords)
LEXICON_PATH = Path(os.environ.get("ORG_PERSON_EXTRACTOR_LEXICON", DATA_DIR / "lexicon.yaml"))

# Report defaults
DEFAULT_OUTPUT_FORMAT = "table"
REPORT_TITLE = "Text analysis results:"
REPORT_COLUMNS = ("No.", "Organization", "Person")


@dataclass(frozen=True)
class Lexicon:
    """Word lists consulted by the entity rules.

    Attributes:
        titles: Lowercase title words, matched exactly against the token
            directly before a candidate name
        org_keywords: Lowercase substrings that mark a token as part of an
            organization name
    """
    titles: Tuple[str, ...]
    org_keywords: Tuple[str, ...]

    @property
    def abbreviations(self) -> Tuple[str, ...]:
        """Titles written with a trailing period (they never end a sentence)."""
        return tuple(title for title in self.titles if title.endswith("."))


def _read_yaml(path: Path) -> object:
    with open(path, "r", encoding="utf-8") as f:
        try:
            return yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Lexicon file {path} is not valid YAML: {e}") from e


def _unique_lower(words: Iterable[str]) -> Tuple[str, ...]:
    seen = {}
    for word in words:
        word = str(word).strip().lower()
        if word:
            seen.setdefault(word, None)
    return tuple(seen)


def _read_section(section: object, language: str, key: str) -> List[str]:
    if not isinstance(section, dict):
        raise ValueError(f"Lexicon section '{language}' must be a mapping")

    words = section.get(key) or []
    if not isinstance(words, list):
        raise ValueError(f"Lexicon entry '{language}.{key}' must be a list")

    return words


def load_lexicon(path: Optional[Path] = None, languages: Optional[Iterable[str]] = None) -> Lexicon:
    """Load title words and organization keywords from a YAML file.

    The file maps language codes to sections holding ``titles`` and
    ``org_keywords`` lists. Selected sections are merged in order, entries are
    lowercased and duplicates dropped.

    Args:
        path: Lexicon YAML file. Defaults to LEXICON_PATH.
        languages: Language codes to merge. None merges every section in
            file order.

    Returns:
        Lexicon built from the selected sections.

    Raises:
        FileNotFoundError: If the lexicon file doesn't exist.
        ValueError: If the file is empty or malformed, or a language is unknown.
    """
    path = Path(path) if path is not None else LEXICON_PATH

    if not path.exists():
        raise FileNotFoundError(
            f"Lexicon not found at {path}. "
            f"Please ensure the lexicon file exists."
        )

    data = _read_yaml(path)

    if not data or not isinstance(data, dict):
        raise ValueError(f"Lexicon file {path} is empty or invalid")

    selected = list(languages) if languages is not None else list(data)
    unknown = [language for language in selected if language not in data]
    if unknown:
        raise ValueError(
            f"Unknown lexicon language(s) {', '.join(unknown)}; "
            f"available: {', '.join(data)}"
        )

    titles: List[str] = []
    org_keywords: List[str] = []
    for language in selected:
        titles.extend(_read_section(data[language], language, "titles"))
        org_keywords.extend(_read_section(data[language], language, "org_keywords"))

    lexicon = Lexicon(titles=_unique_lower(titles), org_keywords=_unique_lower(org_keywords))
    logger.debug(
        f"Loaded lexicon from {path} "
        f"({len(lexicon.titles)} titles, {len(lexicon.org_keywords)} organization keywords)"
    )
    return lexicon


def lexicon_languages(path: Optional[Path] = None) -> Dict[str, int]:
    """List the languages defined in a lexicon file.

    Returns:
        Mapping of language code to the number of entries in its section

    Raises:
        ValueError: If the file or one of its sections is malformed.
    """
    path = Path(path) if path is not None else LEXICON_PATH

    data = _read_yaml(path) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Lexicon file {path} is empty or invalid")

    return {
        language: len(_read_section(section, language, "titles"))
        + len(_read_section(section, language, "org_keywords"))
        for language, section in data.items()
    }
