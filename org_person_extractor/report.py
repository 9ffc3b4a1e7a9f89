"""Tabular reports of extracted entities."""
import json
from pathlib import Path
from typing import Optional, Union

import pandas as pd

from org_person_extractor.classifier import AnalysisResult
from org_person_extractor.config import DEFAULT_OUTPUT_FORMAT, REPORT_COLUMNS, REPORT_TITLE

OUTPUT_FORMATS = ("table", "text", "csv", "json")

# Output formats inferred from report file suffixes
SUFFIX_FORMATS = {".csv": "csv", ".json": "json"}


def build_report_table(result: AnalysisResult) -> pd.DataFrame:
    """Lay out organizations and personalities side by side.

    Row i holds the i-th organization and the i-th person; the shorter list
    is padded with empty strings.

    Args:
        result: Analysis result to report

    Returns:
        DataFrame with the REPORT_COLUMNS columns, numbered from 1
    """
    number_col, org_col, person_col = REPORT_COLUMNS
    n_rows = max(len(result.organizations), len(result.personalities))

    organizations = list(result.organizations) + [""] * (n_rows - len(result.organizations))
    personalities = list(result.personalities) + [""] * (n_rows - len(result.personalities))

    return pd.DataFrame({
        number_col: range(1, n_rows + 1),
        org_col: organizations,
        person_col: personalities,
    }, columns=list(REPORT_COLUMNS))


def _render_text(table: pd.DataFrame) -> str:
    number_col, org_col, person_col = REPORT_COLUMNS
    lines = [
        REPORT_TITLE,
        "",
        f"{number_col}\t{org_col}\t\t{person_col}",
        "-" * 44,
    ]
    for row in table.itertuples(index=False):
        lines.append(f"{row[0]}\t{row[1]}\t\t{row[2]}")

    return "\n".join(lines) + "\n"


def render_report(result: AnalysisResult, fmt: str = DEFAULT_OUTPUT_FORMAT) -> str:
    """Render an analysis result as a string.

    Args:
        result: Analysis result to report
        fmt: One of OUTPUT_FORMATS
            - table: aligned console table under a title line
            - text: tab-separated rows under a title and a dashed rule
            - csv: comma-separated with a header row
            - json: {"organizations": [...], "personalities": [...]}

    Returns:
        Rendered report

    Raises:
        ValueError: If fmt is not a known format
    """
    if fmt not in OUTPUT_FORMATS:
        raise ValueError(f"Unknown report format '{fmt}'. Choose from: {', '.join(OUTPUT_FORMATS)}")

    if fmt == "json":
        return json.dumps(result.to_dict(), ensure_ascii=False, indent=2) + "\n"

    table = build_report_table(result)

    if fmt == "csv":
        return table.to_csv(index=False)

    if fmt == "text":
        return _render_text(table)

    if table.empty:
        return f"{REPORT_TITLE}\n(no entities found)\n"

    return f"{REPORT_TITLE}\n{table.to_string(index=False)}\n"


def write_report(result: AnalysisResult, path: Union[str, Path], fmt: Optional[str] = None) -> Path:
    """Write a report file.

    Args:
        result: Analysis result to report
        path: Output file path
        fmt: Report format. If None, inferred from the file suffix
            (.csv, .json, anything else is written as text)

    Returns:
        Path of the written file
    """
    path = Path(path)
    if fmt is None:
        fmt = SUFFIX_FORMATS.get(path.suffix.lower(), "text")

    content = render_report(result, fmt)

    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)

    return path
