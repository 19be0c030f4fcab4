"""Deck grouping and two-column rendering."""

from .grouping import (
    DEFAULT_PILE,
    build_blocks,
    coerce_quantity,
    entry_groups,
    group_by_type,
    group_deck,
)
from .layout import (
    COLUMN_CAPACITY,
    ELLIPSIS,
    EMPTY_COLUMN,
    partition_blocks,
    reconstruct,
    render_column,
    render_deck,
    split_blocks,
    subset_sums,
)

__all__ = [
    "COLUMN_CAPACITY",
    "DEFAULT_PILE",
    "ELLIPSIS",
    "EMPTY_COLUMN",
    "build_blocks",
    "coerce_quantity",
    "entry_groups",
    "group_by_type",
    "group_deck",
    "partition_blocks",
    "reconstruct",
    "render_column",
    "render_deck",
    "split_blocks",
    "subset_sums",
]
