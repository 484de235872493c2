"""Decoding of the backend's packed category label strings.

The daily aggregate endpoint joins the categories of one day into a
single string such as ``"Food:25000,Transport:12000"``.  The helpers in
this module turn that string back into labels; the reconciler only ever
sees the split result.
"""

from __future__ import annotations

from typing import Iterable, List, NamedTuple, Optional

LABEL_SEPARATOR = ","
AMOUNT_SEPARATOR = ":"


class CategoryLabel(NamedTuple):
    name: str
    amount: Optional[float] = None


def split_category_labels(raw: Optional[str]) -> List[str]:
    """Split a comma-joined label string into an ordered list.

    ``None`` and ``""`` give ``[]``.  Empty components (e.g. from a
    trailing comma) are kept as empty strings.
    """
    if not raw:
        return []
    return raw.split(LABEL_SEPARATOR)


def parse_category_label(label: str) -> CategoryLabel:
    """Separate the category name from its optional ``:amount`` suffix."""
    name, sep, suffix = label.partition(AMOUNT_SEPARATOR)
    if not sep:
        return CategoryLabel(name.strip())
    try:
        amount: Optional[float] = float(suffix)
    except ValueError:
        amount = None
    return CategoryLabel(name.strip(), amount)


def label_names(labels: Iterable[str]) -> List[str]:
    return [parse_category_label(label).name for label in labels]


def summarize_labels(labels: List[str], limit: int = 3) -> str:
    """Short tooltip text: the first ``limit`` names, then ``...`` if truncated."""
    names = label_names(labels[:limit])
    text = ", ".join(names)
    if len(labels) > limit:
        text += "..."
    return text
