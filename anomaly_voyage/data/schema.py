from pydantic import BaseModel, ConfigDict, Field, ValidationError
from typing import Any, Dict, Mapping, Optional
import pandas as pd

from ..exceptions import MalformedInputError


class PassengerRecord(BaseModel):
    """Schema for a single passenger record"""

    model_config = ConfigDict(frozen=True, extra="ignore")

    passenger_id: int = Field(..., description="Unique passenger identifier")
    pclass: int = Field(..., ge=1, le=3, description="Ticket class (1, 2 or 3)")
    sex: str = Field(..., min_length=1, description="Passenger sex")
    survived: Optional[int] = Field(None, ge=0, le=1, description="Survival flag")
    name: Optional[str] = Field(None, description="Full passenger name")
    age: Optional[float] = Field(None, ge=0, description="Age in years")
    sib_sp: Optional[int] = Field(None, ge=0, description="Siblings/spouses aboard")
    parch: Optional[int] = Field(None, ge=0, description="Parents/children aboard")
    ticket: Optional[str] = Field(None, description="Ticket number")
    fare: Optional[float] = Field(None, ge=0, description="Passenger fare")
    cabin: Optional[str] = Field(None, description="Cabin number")
    embarked: Optional[str] = Field(None, description="Port of embarkation")

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "PassengerRecord":
        """Build a record from a row mapping, treating NaN/NA cells as absent"""
        cleaned = {key: _to_python(value) for key, value in values.items()}
        try:
            return cls.model_validate(cleaned)
        except ValidationError as e:
            raise MalformedInputError(f"Invalid passenger record: {e}") from e


def _to_python(value: Any) -> Any:
    """Unwrap numpy scalars and map NaN/NA to None"""
    if _is_missing(value):
        return None
    return value.item() if hasattr(value, "item") else value


def _is_missing(value: Any) -> bool:
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


class PassengerSchema:
    """Schema validation and conversion utilities for passenger data"""

    # Source CSV header -> standardized column
    COLUMN_MAPPING: Dict[str, str] = {
        "PassengerId": "passenger_id",
        "Survived": "survived",
        "Pclass": "pclass",
        "Name": "name",
        "Sex": "sex",
        "Age": "age",
        "SibSp": "sib_sp",
        "Parch": "parch",
        "Ticket": "ticket",
        "Fare": "fare",
        "Cabin": "cabin",
        "Embarked": "embarked",
    }

    REQUIRED_COLUMNS = ["passenger_id", "pclass", "sex"]
    OPTIONAL_COLUMNS = [
        "survived",
        "name",
        "age",
        "sib_sp",
        "parch",
        "ticket",
        "fare",
        "cabin",
        "embarked",
    ]
    INTEGER_COLUMNS = ["passenger_id", "survived", "pclass", "sib_sp", "parch"]
    FLOAT_COLUMNS = ["age", "fare"]
    STRING_COLUMNS = ["name", "sex", "ticket", "cabin", "embarked"]

    @staticmethod
    def validate_dataframe(df: pd.DataFrame) -> bool:
        """Validate that a dataframe matches the passenger schema"""
        missing_cols = set(PassengerSchema.REQUIRED_COLUMNS) - set(df.columns)
        if missing_cols:
            raise MalformedInputError(f"Missing required columns: {sorted(missing_cols)}")

        for column in PassengerSchema.REQUIRED_COLUMNS:
            null_count = int(df[column].isna().sum())
            if null_count > 0:
                raise MalformedInputError(
                    f"'{column}' is required but missing for {null_count} record(s)"
                )

        for column in PassengerSchema.INTEGER_COLUMNS + PassengerSchema.FLOAT_COLUMNS:
            if column in df.columns and not pd.api.types.is_numeric_dtype(df[column]):
                raise MalformedInputError(f"'{column}' column must be numeric")

        duplicated = df["passenger_id"][df["passenger_id"].duplicated()]
        if len(duplicated) > 0:
            raise MalformedInputError(
                f"Duplicate passenger ids: {sorted(duplicated.unique().tolist())[:10]}"
            )

        invalid_class = ~df["pclass"].isin([1, 2, 3])
        if invalid_class.any():
            raise MalformedInputError(
                f"'pclass' must be 1, 2 or 3; found {sorted(df.loc[invalid_class, 'pclass'].unique().tolist())}"
            )

        for column in ["sib_sp", "parch", "fare", "age"]:
            if column in df.columns and (df[column] < 0).any():
                raise MalformedInputError(f"'{column}' values cannot be negative")

        if "survived" in df.columns and (~df["survived"].dropna().isin([0, 1])).any():
            raise MalformedInputError("'survived' values must be 0 or 1")

        return True

    @staticmethod
    def standardize_dataframe(df: pd.DataFrame) -> pd.DataFrame:
        """Convert dataframe to standard column names and dtypes"""
        df = df.rename(columns=PassengerSchema.COLUMN_MAPPING).copy()

        # An empty record set is valid; give it the full typed column set
        if len(df) == 0:
            for column in PassengerSchema.REQUIRED_COLUMNS:
                if column not in df.columns:
                    df[column] = pd.NA

        # Every known column exists so downstream steps can rely on it
        for column in PassengerSchema.OPTIONAL_COLUMNS:
            if column not in df.columns:
                df[column] = pd.NA

        for column in PassengerSchema.INTEGER_COLUMNS:
            if column not in df.columns:
                continue
            if df[column].isna().all():
                df[column] = pd.Series(pd.NA, index=df.index, dtype="Int64")
                continue
            try:
                df[column] = pd.to_numeric(df[column]).astype("Int64")
            except (TypeError, ValueError) as e:
                raise MalformedInputError(f"'{column}' column must hold integers: {e}") from e

        for column in PassengerSchema.FLOAT_COLUMNS:
            if df[column].isna().all():
                df[column] = pd.Series(float("nan"), index=df.index, dtype="float64")
                continue
            try:
                df[column] = pd.to_numeric(df[column]).astype("float64")
            except (TypeError, ValueError) as e:
                raise MalformedInputError(f"'{column}' column must be numeric: {e}") from e

        for column in PassengerSchema.STRING_COLUMNS:
            if column not in df.columns:
                continue
            # Empty cells stay None; an explicit object Series keeps string dtypes from turning None into NaN
            values = [None if _is_missing(v) or str(v) == "" else str(v) for v in df[column].astype("object")]
            df[column] = pd.Series(values, index=df.index, dtype="object")

        return df.reset_index(drop=True)
