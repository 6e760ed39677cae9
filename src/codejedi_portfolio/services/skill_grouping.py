"""Cluster raw skill names into comma-joined display strings.

Grouping is presentation policy only. Every input skill appears in exactly one
output string, in input order.
"""

from __future__ import annotations

from collections.abc import Sequence

# Category keyword -> fixed chunk size. Checked in order against the lowercased title.
CATEGORY_CHUNK_SIZES: tuple[tuple[str, int], ...] = (
    ("language", 4),
    ("cloud", 4),
)


def _chunk(skills: Sequence[str], size: int) -> list[str]:
    return [", ".join(skills[i : i + size]) for i in range(0, len(skills), size)]


def _chunk_size_for(category: str) -> int | None:
    title = category.lower()
    for keyword, size in CATEGORY_CHUNK_SIZES:
        if keyword in title:
            return size
    return None


def group_skills(category: str, skills: Sequence[str]) -> list[str]:
    """Group a category's skill names for display.

    Categories matching a keyword in ``CATEGORY_CHUNK_SIZES`` use that chunk
    size. Otherwise: up to two skills share one line, exactly three are listed
    individually, four to six are paired, and larger lists go in threes.
    """
    if not skills:
        return []

    size = _chunk_size_for(category)
    if size is not None:
        return _chunk(skills, size)

    count = len(skills)
    if count <= 2:
        return [", ".join(skills)]
    if count == 3:
        return list(skills)
    if count <= 6:
        return _chunk(skills, 2)
    return _chunk(skills, 3)
