"""Result aggregation and reporting."""

import logging
import sys
from typing import Mapping, Optional, TextIO

import pandas as pd

from ..core.models import ResultTable


class ResultAggregator:
    """Formats a sweep's result table for export."""

    def __init__(self, table: Optional[ResultTable] = None):
        self.table = table
        self.logger = logging.getLogger(__name__)

    def set_table(self, table: ResultTable) -> None:
        """Replace the table being reported."""
        self.table = table

    def to_dataframe(self) -> pd.DataFrame:
        """
        Convert the table to a pandas DataFrame.

        Rows are tools and columns are concurrency levels; the index is named
        ``concurrency`` so it heads the first column of the exported TSV.
        """
        if self.table is None:
            return pd.DataFrame(index=pd.Index([], name="concurrency"))

        return pd.DataFrame(
            [list(self.table.row(name)) for name in self.table.tools],
            index=pd.Index(list(self.table.tools), name="concurrency"),
            columns=list(self.table.concurrencies),
            dtype=float,
        )

    def get_tsv_string(self) -> str:
        """Get results as TSV string for easy copy/paste to spreadsheet."""
        df = self.to_dataframe()
        return df.to_csv(sep="\t", lineterminator="\n")

    def to_tsv(self, path: str) -> None:
        """Export to TSV file."""
        with open(path, "w", encoding="utf-8") as f:
            f.write(self.get_tsv_string())
        self.logger.info(f"Results written to {path}")

    def print_report(self, stream: Optional[TextIO] = None) -> None:
        """Write the TSV report, to stdout unless another stream is given."""
        if stream is None:
            stream = sys.stdout
        stream.write(self.get_tsv_string())
        stream.flush()

    def print_column(self, concurrency: int, column: Mapping[str, float]) -> None:
        """Log the measurements taken at one concurrency level."""
        summary = ", ".join(f"{name}={value:.2f}" for name, value in column.items())
        self.logger.info(f"concurrency={concurrency}: {summary} req/s")
