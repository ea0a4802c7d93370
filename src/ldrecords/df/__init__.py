"""
DataFrame subpackage - requires polars.

Triplify table rows and view flat triples as a table.
"""

from ldrecords.df.frames import (
    TRIPLE_COLUMNS,
    records_from_frame,
    triplify_frame,
    triples_frame,
)

__all__ = [
    "TRIPLE_COLUMNS",
    "records_from_frame",
    "triplify_frame",
    "triples_frame",
]
