"""Heuristic rules for person and organization spans.

Each rule pairs a detection predicate with a span extractor. Predicates look
at a capitalized token and its neighbours; extractors grow a span rightward
from that token. Rules are tried in the order of DEFAULT_RULES and the first
rule whose predicate fires decides the position, so a token that looks like
both a person and an organization is always treated as a person.

Person rules:
- the token before is a title word ("г-н Иванов", "dr. Watson")
- the token after is capitalized ("John Smith")
- the token and the token before both contain a period ("A. B.")

Person spans need at least two tokens. Organization spans may be a single
token.
"""
from dataclasses import dataclass
from typing import Callable, Literal, Optional, Sequence, Tuple

from org_person_extractor.config import Lexicon

EntityKind = Literal['person', 'organization']

PERSON = 'person'
ORGANIZATION = 'organization'

# How many tokens after the current one may carry an organization keyword
ORG_LOOKAHEAD = 2

# Maximum organization span length, the starting token included
ORG_MAX_TOKENS = 5


def is_capitalized(token: str) -> bool:
    """Check if a token starts with an uppercase letter.

    Characters without case (digits, symbols, caseless scripts) never count
    as capitalized.

    Example:
        >>> is_capitalized("Smith"), is_capitalized("smith"), is_capitalized("42")
        (True, False, False)
    """
    if not token:
        return False

    first = token[0]
    return first == first.upper() and first != first.lower()


def has_org_keyword(token: str, keywords: Sequence[str]) -> bool:
    """Check if the lowercased token contains any organization keyword."""
    lowered = token.lower()
    return any(keyword in lowered for keyword in keywords)


def is_person(tokens: Sequence[str], index: int, lexicon: Lexicon) -> bool:
    """Check if the token at index looks like the start of a person name.

    Args:
        tokens: Sentence tokens
        index: Position of a capitalized token
        lexicon: Lexicon providing title words

    Returns:
        True if any person rule fires at index
    """
    # Title word right before the name
    if index > 0 and tokens[index - 1].lower() in lexicon.titles:
        return True

    # First name followed by a capitalized surname
    if index < len(tokens) - 1 and is_capitalized(tokens[index + 1]):
        return True

    # Initials
    if '.' in tokens[index] and index > 0 and '.' in tokens[index - 1]:
        return True

    return False


def extract_full_name(tokens: Sequence[str], index: int, lexicon: Optional[Lexicon] = None) -> Optional[Tuple[str, ...]]:
    """Grow a person name rightward from index.

    Following tokens are appended while they are capitalized or contain a
    period.

    Args:
        tokens: Sentence tokens
        index: Position where the name starts
        lexicon: Unused, accepted so all extractors share one signature

    Returns:
        Tuple of name tokens, or None if the name is a single token
    """
    name_parts = [tokens[index]]

    for token in tokens[index + 1:]:
        if not (is_capitalized(token) or '.' in token):
            break
        name_parts.append(token)

    return tuple(name_parts) if len(name_parts) > 1 else None


def is_organization(tokens: Sequence[str], index: int, lexicon: Lexicon) -> bool:
    """Check if the token at index looks like the start of an organization name.

    Args:
        tokens: Sentence tokens
        index: Position of a capitalized token
        lexicon: Lexicon providing organization keywords

    Returns:
        True if the token or one of the next ORG_LOOKAHEAD tokens contains
        an organization keyword
    """
    window = tokens[index:index + 1 + ORG_LOOKAHEAD]
    return any(has_org_keyword(token, lexicon.org_keywords) for token in window)


def extract_organization_name(tokens: Sequence[str], index: int, lexicon: Lexicon) -> Optional[Tuple[str, ...]]:
    """Grow an organization name rightward from index.

    Up to ORG_MAX_TOKENS - 1 following tokens are appended while they are
    capitalized or contain an organization keyword.

    Args:
        tokens: Sentence tokens
        index: Position where the name starts
        lexicon: Lexicon providing organization keywords

    Returns:
        Tuple of name tokens (a single token is a valid organization name)
    """
    org_parts = [tokens[index]]

    for token in tokens[index + 1:index + ORG_MAX_TOKENS]:
        if not (is_capitalized(token) or has_org_keyword(token, lexicon.org_keywords)):
            break
        org_parts.append(token)

    return tuple(org_parts)


@dataclass(frozen=True)
class EntityRule:
    """A detection predicate paired with the extractor it gates.

    Attributes:
        kind: Entity kind recorded for spans this rule accepts
        matches: Predicate called as matches(tokens, index, lexicon)
        extract: Extractor called as extract(tokens, index, lexicon); returns
            the span tokens or None to reject the position
    """
    kind: EntityKind
    matches: Callable[[Sequence[str], int, Lexicon], bool]
    extract: Callable[[Sequence[str], int, Lexicon], Optional[Tuple[str, ...]]]


# Priority order: person before organization
DEFAULT_RULES: Tuple[EntityRule, ...] = (
    EntityRule(kind=PERSON, matches=is_person, extract=extract_full_name),
    EntityRule(kind=ORGANIZATION, matches=is_organization, extract=extract_organization_name),
)
