"""
Localized resource loading from CSV and Excel files.

Each row holds one resource: an identifier, the source string, its
translation and, optionally, the language of the translation.
"""

import logging
from pathlib import Path
from typing import Optional, Union

import pandas as pd

from .models import LocResource

logger = logging.getLogger(__name__)


class ResourceLoadError(Exception):
    """Raised when resource loading fails."""
    pass


# Common column name variations for resource tables
ID_COLUMN_VARIANTS = ["resource_id", "id", "resource", "string_id", "key", "name"]
SOURCE_COLUMN_VARIANTS = ["source", "source_string", "source_text", "original", "en_us"]
TARGET_COLUMN_VARIANTS = ["target", "target_string", "target_text", "translation", "translated"]
LANGUAGE_COLUMN_VARIANTS = ["language", "lang", "culture", "locale", "target_language"]


def _normalize_column_name(name: str) -> str:
    """Normalize column name for matching."""
    return str(name).lower().strip().replace(" ", "_").replace("-", "_")


def _find_column(df: pd.DataFrame, variants: list[str]) -> Optional[str]:
    """
    Find a column in the DataFrame matching one of the variant names.

    Args:
        df: The DataFrame to search.
        variants: List of possible column name variants.

    Returns:
        The actual column name if found, None otherwise.
    """
    normalized_columns = {_normalize_column_name(col): col for col in df.columns}

    for variant in variants:
        normalized = _normalize_column_name(variant)
        if normalized in normalized_columns:
            return normalized_columns[normalized]

    return None


def _cell_text(row: pd.Series, column: Optional[str]) -> str:
    if column is None or pd.isna(row[column]):
        return ""
    return str(row[column])


def load_resources_from_csv(file_path: Union[str, Path]) -> list[LocResource]:
    """
    Load resources from a CSV file.

    Args:
        file_path: Path to the CSV file.

    Returns:
        List of LocResource objects.

    Raises:
        ResourceLoadError: If the file cannot be read or parsed.
    """
    path = Path(file_path)

    if not path.exists():
        raise ResourceLoadError(f"File not found: {file_path}")

    # keep_default_na=False: "NA" and "null" are legitimate strings here
    try:
        df = pd.read_csv(path, encoding="utf-8", dtype=str, keep_default_na=False)
    except UnicodeDecodeError:
        try:
            df = pd.read_csv(path, encoding="latin-1", dtype=str, keep_default_na=False)
        except Exception as e:
            raise ResourceLoadError(f"Failed to read CSV file: {e}")
    except Exception as e:
        raise ResourceLoadError(f"Failed to read CSV file: {e}")

    return _parse_resource_dataframe(df)


def load_resources_from_excel(
    file_path: Union[str, Path],
    sheet_name: Optional[str] = None,
) -> list[LocResource]:
    """
    Load resources from an Excel file.

    Args:
        file_path: Path to the Excel file (.xlsx or .xls).
        sheet_name: Optional sheet name to read from. Defaults to first sheet.

    Returns:
        List of LocResource objects.

    Raises:
        ResourceLoadError: If the file cannot be read or parsed.
    """
    path = Path(file_path)

    if not path.exists():
        raise ResourceLoadError(f"File not found: {file_path}")

    try:
        df = pd.read_excel(path, sheet_name=sheet_name or 0, dtype=str, keep_default_na=False)
    except Exception as e:
        raise ResourceLoadError(f"Failed to read Excel file: {e}")

    return _parse_resource_dataframe(df)


def _parse_resource_dataframe(df: pd.DataFrame) -> list[LocResource]:
    """
    Parse a DataFrame into a list of LocResource objects.

    Args:
        df: DataFrame containing resource data.

    Returns:
        List of LocResource objects.

    Raises:
        ResourceLoadError: If required columns are missing.
    """
    if df.empty:
        raise ResourceLoadError("Resource file is empty")

    source_col = _find_column(df, SOURCE_COLUMN_VARIANTS)
    target_col = _find_column(df, TARGET_COLUMN_VARIANTS)
    missing = [
        label for label, col in (("source", source_col), ("target", target_col))
        if col is None
    ]
    if missing:
        raise ResourceLoadError(
            f"Missing required column(s): {', '.join(missing)}. "
            f"Found columns: {', '.join(str(c) for c in df.columns)}"
        )

    id_col = _find_column(df, ID_COLUMN_VARIANTS)
    language_col = _find_column(df, LANGUAGE_COLUMN_VARIANTS)

    resources: list[LocResource] = []

    for index, row in df.iterrows():
        # Spreadsheet row number (header is row 1)
        row_number = int(index) + 2
        source = _cell_text(row, source_col)
        target = _cell_text(row, target_col)

        if not source.strip() and not target.strip():
            logger.warning(f"Skipping row {row_number}: empty source and target")
            continue

        resource_id = _cell_text(row, id_col).strip() or f"row {row_number}"
        language = _cell_text(row, language_col).strip() or None

        resources.append(LocResource(
            resource_id=resource_id,
            source=source,
            target=target,
            language=language,
        ))

    if not resources:
        raise ResourceLoadError("No valid resources found in file")

    return resources


def load_resources(
    file_path: Union[str, Path],
    sheet_name: Optional[str] = None,
) -> list[LocResource]:
    """
    Load resources from a CSV or Excel file.

    Automatically detects file type based on extension.

    Args:
        file_path: Path to the resource file.
        sheet_name: Optional sheet name for Excel files.

    Returns:
        List of LocResource objects.

    Raises:
        ResourceLoadError: If the file cannot be read or is invalid.
    """
    path = Path(file_path)
    suffix = path.suffix.lower()

    if suffix == ".csv":
        return load_resources_from_csv(path)
    elif suffix in (".xlsx", ".xls"):
        return load_resources_from_excel(path, sheet_name)
    else:
        raise ResourceLoadError(
            f"Unsupported file format: {suffix}. Supported formats: .csv, .xlsx, .xls"
        )
