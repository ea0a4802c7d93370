"""
DataFrame utilities - requires polars.

Tabular data in, tabular triples out. No hidden configuration.
"""

__all__ = [
    "TRIPLE_COLUMNS",
    "records_from_frame",
    "triplify_frame",
    "triples_frame",
]

from typing import Any, Iterable, Iterator, List, Mapping, Optional

import polars as pl

from ldrecords.triples.flat import FlatTriple
from ldrecords.triples.triplify import triplify_all

TRIPLE_COLUMNS = ["subject", "predicate", "object", "datatype", "lang"]


def records_from_frame(frame: pl.DataFrame) -> Iterator[dict]:
    """
    Yield each row of a DataFrame as a record, dropping null cells.

    Args:
        frame: Input DataFrame; column names are the predicates

    Example:
        >>> df = pl.DataFrame({"name": ["Ada", "Alan"], "born": [1815, None]})
        >>> list(records_from_frame(df))
        [{'name': 'Ada', 'born': 1815}, {'name': 'Alan'}]
    """
    for row in frame.iter_rows(named=True):
        yield {column: value for column, value in row.items() if value is not None}


def triplify_frame(
    resources: Optional[Mapping[Any, Any]],
    selector: Any,
    frame: pl.DataFrame,
) -> List[FlatTriple]:
    """
    Triplify every row of a DataFrame.

    Args:
        resources: Optional resource map
        selector: Subject selector, as for triplify_all. A field selector
                  names a column; that column is triplified as well.
                  A row whose subject cell is null raises KeyError.
        frame: Input DataFrame

    Returns:
        FlatTriples for all rows, in row order
    """
    return triplify_all(resources, selector, records_from_frame(frame))


def triples_frame(flat_triples: Iterable[FlatTriple]) -> pl.DataFrame:
    """
    Build a DataFrame with one row per FlatTriple.

    Columns are subject, predicate, object, datatype and lang; missing
    trailing fields are null. All values are rendered as strings.

    Example:
        >>> triples_frame([("ex:s", "ex:p", "ex:o")]).shape
        (1, 5)
    """
    columns = {column: [] for column in TRIPLE_COLUMNS}
    for triple in flat_triples:
        padded = list(triple) + [None] * (len(TRIPLE_COLUMNS) - len(triple))
        for column, value in zip(TRIPLE_COLUMNS, padded):
            columns[column].append(None if value is None else str(value))
    return pl.DataFrame(columns, schema={column: pl.Utf8 for column in TRIPLE_COLUMNS})
