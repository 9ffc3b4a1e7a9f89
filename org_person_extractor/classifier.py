"""Entity classifier: scans text for person and organization names."""
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from org_person_extractor.config import Lexicon, load_lexicon
from org_person_extractor.rules import DEFAULT_RULES, EntityKind, EntityRule, ORGANIZATION, PERSON, is_capitalized
from org_person_extractor.segmentation import segment


@dataclass(frozen=True)
class EntitySpan:
    """A contiguous run of tokens accepted as one entity.

    Attributes:
        kind: "person" or "organization"
        tokens: Tokens of the span, in sentence order
        start: Index of the first token in the sentence
        end: Index one past the last token
    """
    kind: EntityKind
    tokens: Tuple[str, ...]
    start: int
    end: int

    @property
    def text(self) -> str:
        return ' '.join(self.tokens)


@dataclass(frozen=True)
class AnalysisResult:
    """Snapshot of the entities found in a document.

    Attributes:
        organizations: Organization names in order of first occurrence
        personalities: Person names in order of first occurrence
    """
    organizations: Tuple[str, ...]
    personalities: Tuple[str, ...]

    @property
    def is_empty(self) -> bool:
        return not self.organizations and not self.personalities

    def to_dict(self) -> Dict[str, List[str]]:
        return {
            "organizations": list(self.organizations),
            "personalities": list(self.personalities),
        }


class EntityClassifier:
    """Rule-based extractor of person and organization names.

    Every sentence is scanned left to right. At each capitalized token the
    rules are tried in priority order (person, then organization); an accepted
    span is recorded and the scan resumes right after it.

    Example:
        >>> classifier = EntityClassifier()
        >>> classifier.analyze("The deal between Mr. John Smith and Acme corp was signed.")
        >>> classifier.get_results().personalities
        ('Mr. John Smith',)
        >>> classifier.get_results().organizations
        ('Acme corp',)
    """

    def __init__(self, lexicon: Optional[Lexicon] = None, rules: Optional[Sequence[EntityRule]] = None):
        """
        Initialize the EntityClassifier.

        Args:
            lexicon: Title words and organization keywords. Defaults to the
                bundled lexicon with every language merged.
            rules: Rules in priority order. Defaults to DEFAULT_RULES.
        """
        self.lexicon = lexicon if lexicon is not None else load_lexicon()
        self.rules = tuple(rules) if rules is not None else DEFAULT_RULES
        # Dicts keep insertion order and deduplicate
        self._organizations: Dict[str, None] = {}
        self._personalities: Dict[str, None] = {}

    def next_position(self, tokens: Sequence[str], cursor: int) -> Tuple[Optional[EntitySpan], int]:
        """Examine the token at cursor and decide where the scan goes next.

        Only the first rule whose predicate fires is tried. If its extractor
        rejects the position, no other rule is consulted.

        Args:
            tokens: Sentence tokens
            cursor: Index of the token to examine

        Returns:
            Tuple of (accepted span or None, index of the next token to examine)
        """
        token = tokens[cursor]
        if not is_capitalized(token):
            return None, cursor + 1

        for rule in self.rules:
            if not rule.matches(tokens, cursor, self.lexicon):
                continue

            span_tokens = rule.extract(tokens, cursor, self.lexicon)
            if not span_tokens:
                return None, cursor + 1

            span = EntitySpan(
                kind=rule.kind,
                tokens=tuple(span_tokens),
                start=cursor,
                end=cursor + len(span_tokens),
            )
            return span, span.end

        return None, cursor + 1

    def scan_sentence(self, tokens: Sequence[str]) -> Iterator[EntitySpan]:
        """Yield the spans accepted in one tokenized sentence."""
        cursor = 0
        while cursor < len(tokens):
            span, cursor = self.next_position(tokens, cursor)
            if span is not None:
                yield span

    def analyze(self, text: str) -> None:
        """
        Scan text and record the person and organization names found.

        Names are added to the entities recorded by earlier calls on this
        instance; use reset() or a new instance for an unrelated document.

        Args:
            text: Document text
        """
        if not text:
            return

        for tokens in segment(text, self.lexicon.abbreviations, self.lexicon.titles):
            for span in self.scan_sentence(tokens):
                self._record(span)

    def _record(self, span: EntitySpan) -> None:
        if span.kind == PERSON:
            self._personalities.setdefault(span.text, None)
        elif span.kind == ORGANIZATION:
            self._organizations.setdefault(span.text, None)
        else:
            raise ValueError(f"Unknown entity kind: {span.kind}")

    def get_results(self) -> AnalysisResult:
        """
        Get the entities found so far.

        Returns:
            AnalysisResult with organizations and personalities in document
            order of first occurrence
        """
        return AnalysisResult(
            organizations=tuple(self._organizations),
            personalities=tuple(self._personalities),
        )

    def reset(self) -> None:
        """Forget every entity recorded so far."""
        self._organizations.clear()
        self._personalities.clear()


def extract_entities(text: str, lexicon: Optional[Lexicon] = None) -> AnalysisResult:
    """
    Extract person and organization names from text.

    This is a convenience function that analyzes the text with a fresh
    EntityClassifier.

    Args:
        text: Document text
        lexicon: Optional lexicon, defaults to the bundled one

    Returns:
        AnalysisResult for the text

    Example:
        >>> extract_entities("Мы встретили Анну Петрову из Инкомбанка.").to_dict()
        {'organizations': ['Инкомбанка'], 'personalities': ['Анну Петрову']}
    """
    classifier = EntityClassifier(lexicon=lexicon)
    classifier.analyze(text)
    return classifier.get_results()
