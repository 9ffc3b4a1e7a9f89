"""Sentence and word segmentation for entity extraction.

This module splits raw text into sentences and sentences into word tokens.
Tokens keep their surface form: no case folding, no accent stripping, and a
period written directly after a word stays attached to it (initials and
abbreviations such as "A." or "Dr." depend on this).
"""
import re
from typing import Iterable, List

# Terminal punctuation, one or more consecutive marks
SENTENCE_END_RE = re.compile(r"[.!?]+")

# Word characters joined by internal hyphens, apostrophes or periods,
# with an optional directly adjacent trailing period
TOKEN_RE = re.compile(r"\w+(?:[-'’.]\w+)*\.?")

# Word written directly before a punctuation run
_LAST_WORD_RE = re.compile(r"(\w+(?:[-'’.]\w+)*)$")

# Neighbouring words of a one-letter initial, quotes and commas skipped
_PREV_WORD_RE = re.compile(r"(\w+(?:[-'’.]\w+)*\.?)[^\w\s]*\s+$")
_NEXT_WORD_RE = re.compile(r"\s+[^\w\s]*(\w+(?:[-'’.]\w+)*\.?)")

# One letter followed by a period, e.g. "A." or "И."
_INITIAL_TOKEN_RE = re.compile(r"[^\W\d_]\.")

MAX_WORD_LOOKBEHIND = 64


def _is_initialism(word: str) -> bool:
    # "A", "U.S", "т.е"
    return all(len(part) == 1 and part.isalpha() for part in word.split("."))


def _in_name_run(text: str, word_start: int, period_end: int,
                 abbreviations: frozenset, titles: frozenset) -> bool:
    """Whether a one-letter initial stands next to other parts of a name.

    "John A. Smith", "Иванов И. И." and "A. B. Test" qualify; "plan B. Then"
    does not.
    """
    prev = _PREV_WORD_RE.search(text, max(0, word_start - MAX_WORD_LOOKBEHIND), word_start)
    if prev is not None:
        prev = prev.group(1)
        lowered = prev.lower()
        if (prev[:1].isupper() or _INITIAL_TOKEN_RE.fullmatch(prev)
                or lowered in titles or lowered in abbreviations):
            return True

    following = _NEXT_WORD_RE.match(text, period_end)
    return following is not None and _INITIAL_TOKEN_RE.fullmatch(following.group(1)) is not None


def _keeps_period(text: str, match: re.Match, abbreviations: frozenset, titles: frozenset) -> bool:
    """Whether a punctuation run is an abbreviation period rather than a boundary."""
    if match.group() != ".":
        return False

    # A period at the very end of the text always closes the sentence
    rest = text[match.end():]
    if not rest.strip():
        return False

    # Internal period, e.g. "U.S" or "3.14"
    if rest[0].isalnum():
        return True

    if not rest[0].isspace():
        return False

    found = _LAST_WORD_RE.search(text, max(0, match.start() - MAX_WORD_LOOKBEHIND), match.start())
    if found is None:
        return False

    word = found.group(1)
    if f"{word.lower()}." in abbreviations:
        return True

    if not _is_initialism(word):
        return False

    # Dotted initialisms ("U.S.") always keep their period
    if "." in word:
        return True

    return _in_name_run(text, found.start(1), match.end(), abbreviations, titles)


def split_sentences(text: str, abbreviations: Iterable[str] = (), titles: Iterable[str] = ()) -> List[str]:
    """Split text into sentences on terminal punctuation.

    Every run of ".", "!" or "?" ends a sentence, except a single period that
    is followed by more text and closes one of the given abbreviations, a
    dotted initialism ("U.S."), or a one-letter initial that belongs to a
    name. An initial belongs to a name when the word before it is
    capitalized, an initial or a title, or the word after it is another
    initial ("A. B. Test", "Иванов И. И."). A period inside a word ("U.S",
    "3.14") is never a boundary.

    Args:
        text: Input text
        abbreviations: Lowercase abbreviations written with their period
            (e.g. "dr.")
        titles: Lowercase title words that may precede an initial
            (e.g. "г-н")

    Returns:
        List of non-empty, stripped sentence strings

    Example:
        >>> split_sentences("Dr. Watson arrived. He sat down!", ["dr."])
        ['Dr. Watson arrived', 'He sat down']
        >>> split_sentences("We chose plan B. Then we left.")
        ['We chose plan B', 'Then we left']
    """
    if not text:
        return []

    abbreviations = frozenset(abbreviations)
    titles = frozenset(titles)
    sentences = []
    start = 0

    for match in SENTENCE_END_RE.finditer(text):
        if _keeps_period(text, match, abbreviations, titles):
            continue

        sentences.append(text[start:match.start()])
        start = match.end()

    sentences.append(text[start:])

    return [sentence.strip() for sentence in sentences if sentence.strip()]


def tokenize(sentence: str) -> List[str]:
    """Split a sentence into word tokens.

    Args:
        sentence: Sentence text

    Returns:
        List of tokens in order of appearance

    Example:
        >>> tokenize("г-н A. B. O'Neil, ООО «Ромашка»")
        ['г-н', 'A.', 'B.', "O'Neil", 'ООО', 'Ромашка']
    """
    if not sentence:
        return []

    return TOKEN_RE.findall(sentence)


def segment(text: str, abbreviations: Iterable[str] = (), titles: Iterable[str] = ()) -> List[List[str]]:
    """Split text into sentences of tokens, dropping sentences without tokens."""
    tokenized = (tokenize(sentence) for sentence in split_sentences(text, abbreviations, titles))
    return [tokens for tokens in tokenized if tokens]
