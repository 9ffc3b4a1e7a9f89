"""Command-line entry point for entity extraction.

Usage:
    org-person-extractor document.docx
    org-person-extractor document.txt report.txt
    org-person-extractor document.txt report.csv --lang ru
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from org_person_extractor.classifier import EntityClassifier
from org_person_extractor.config import LEXICON_PATH, lexicon_languages, load_lexicon
from org_person_extractor.documents import read_document
from org_person_extractor.report import OUTPUT_FORMATS, render_report, write_report

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="org-person-extractor",
        description="Extract organization and person names from a .txt or .docx document",
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="Input document (.txt or .docx)",
    )
    parser.add_argument(
        "output",
        nargs="?",
        help="Report file to write (default: print to stdout)",
    )
    parser.add_argument(
        "--format", "-f",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Report format (default: table on stdout, inferred from the output suffix otherwise)",
    )
    parser.add_argument(
        "--lexicon",
        type=Path,
        default=None,
        help=f"Lexicon YAML file with titles and organization keywords (default: {LEXICON_PATH})",
    )
    parser.add_argument(
        "--lang",
        nargs="+",
        default=None,
        help="Lexicon languages to use (default: all)",
    )
    parser.add_argument(
        "--list-languages",
        action="store_true",
        help="List the languages defined in the lexicon and exit",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)
    if not args.input and not args.list_languages:
        parser.error("the following arguments are required: input")

    return args


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        if args.list_languages:
            for language, n_entries in lexicon_languages(args.lexicon).items():
                print(f"{language}\t{n_entries} entries")
            return 0

        lexicon = load_lexicon(args.lexicon, args.lang)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load lexicon: {e}")
        return 1

    logger.info(f"Processing file: {args.input}")

    try:
        text = read_document(args.input)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to process the file: {e}")
        return 1

    classifier = EntityClassifier(lexicon=lexicon)
    classifier.analyze(text)
    results = classifier.get_results()

    logger.info(
        f"Found {len(results.organizations)} organizations "
        f"and {len(results.personalities)} personalities"
    )

    if args.output:
        try:
            path = write_report(results, args.output, args.format)
        except OSError as e:
            logger.error(f"Failed to write report: {e}")
            return 1
        logger.info(f"Results saved to {path}")
    else:
        sys.stdout.write(render_report(results, args.format or "table"))

    return 0


if __name__ == "__main__":
    sys.exit(main())
