# src/tabledrag_tree/core/csv_parser.py
from typing import List

import pandas as pd

REQUIRED_COLUMNS = ["id", "pid", "name", "description", "weight"]


class CSVParser:
    """Handles CSV file parsing and validation."""

    @staticmethod
    def parse_csv(file_path) -> pd.DataFrame:
        """Loads an items CSV file and validates required columns."""
        data = pd.read_csv(file_path, keep_default_na=False)
        missing = [column for column in REQUIRED_COLUMNS if column not in data.columns]
        if missing:
            raise ValueError(f"⚠️ CSV file is missing required column(s): {', '.join(missing)}")
        if (data["id"] < 1).any():
            invalid = sorted(int(value) for value in data.loc[data["id"] < 1, "id"])
            raise ValueError(f"⚠️ CSV file has item ids below 1: {invalid}")
        if data["id"].duplicated().any():
            duplicates = sorted(int(value) for value in data.loc[data["id"].duplicated(), "id"].unique())
            raise ValueError(f"⚠️ CSV file has duplicate item ids: {duplicates}")
        return data

    @staticmethod
    def to_records(data: pd.DataFrame) -> List[dict]:
        """Converts parsed rows to plain dicts with Python ints."""
        records = []
        for row in data[REQUIRED_COLUMNS].itertuples(index=False):
            records.append(
                {
                    "id": int(row.id),
                    "pid": int(row.pid),
                    "name": str(row.name),
                    "description": str(row.description),
                    "weight": int(row.weight),
                }
            )
        return records
