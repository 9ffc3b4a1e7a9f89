"""Rule-based extraction of person and organization names from text."""
from org_person_extractor.classifier import EntityClassifier, EntitySpan, AnalysisResult, extract_entities
from org_person_extractor.config import Lexicon, load_lexicon
from org_person_extractor.rules import (
    EntityRule,
    DEFAULT_RULES,
    is_capitalized,
    is_person,
    is_organization,
    extract_full_name,
    extract_organization_name
)
from org_person_extractor.segmentation import split_sentences, tokenize, segment
from org_person_extractor.documents import read_document, DocumentError, UnsupportedFormatError
from org_person_extractor.report import build_report_table, render_report, write_report

__version__ = "0.1.0"

__all__ = [
    "EntityClassifier",
    "EntitySpan",
    "AnalysisResult",
    "extract_entities",
    "Lexicon",
    "load_lexicon",
    "EntityRule",
    "DEFAULT_RULES",
    "is_capitalized",
    "is_person",
    "is_organization",
    "extract_full_name",
    "extract_organization_name",
    "split_sentences",
    "tokenize",
    "segment",
    "read_document",
    "DocumentError",
    "UnsupportedFormatError",
    "build_report_table",
    "render_report",
    "write_report",
]
