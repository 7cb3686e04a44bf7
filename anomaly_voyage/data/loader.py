"""
Passenger data loading.
Reads delimited passenger text with a header row into a standardized, validated DataFrame.
"""

import io
import time
import pandas as pd
from pathlib import Path
from typing import Union

from .schema import PassengerSchema
from ..exceptions import MalformedInputError
from ..utils.logger import get_logger

logger = get_logger(__name__)


def _read_passenger_csv(source) -> pd.DataFrame:
    # Everything is read as text and typed by the schema; only empty cells are absent
    try:
        return pd.read_csv(source, dtype=str, keep_default_na=False, na_values=[""])
    except pd.errors.EmptyDataError:
        # No header and no rows: an empty passenger set
        return pd.DataFrame()
    except pd.errors.ParserError as e:
        raise MalformedInputError(f"Could not parse passenger data: {e}") from e


def standardize_passengers(df: pd.DataFrame, validate: bool = True) -> pd.DataFrame:
    """
    Standardize raw passenger columns and optionally validate them

    Args:
        df: Raw passenger DataFrame (source headers or standardized names)
        validate: Whether to validate against the passenger schema

    Returns:
        Standardized passenger DataFrame
    """
    df = PassengerSchema.standardize_dataframe(df)
    if validate:
        PassengerSchema.validate_dataframe(df)
    return df


def parse_passengers(text: str, validate: bool = True) -> pd.DataFrame:
    """
    Parse passenger records from delimited text

    Args:
        text: CSV text whose first line is the header row
        validate: Whether to validate against the passenger schema

    Returns:
        Standardized passenger DataFrame
    """
    df = _read_passenger_csv(io.StringIO(text.strip() + "\n"))
    return standardize_passengers(df, validate=validate)


def load_passengers(file_path: Union[str, Path], validate: bool = True) -> pd.DataFrame:
    """
    Load passenger records from a CSV file

    Args:
        file_path: Path to the CSV file
        validate: Whether to validate against the passenger schema

    Returns:
        Standardized passenger DataFrame
    """
    file_path = Path(file_path)
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    start = time.time()
    df = standardize_passengers(_read_passenger_csv(file_path), validate=validate)
    logger.log_data_loading(file_path.name, len(df), time.time() - start)
    return df
