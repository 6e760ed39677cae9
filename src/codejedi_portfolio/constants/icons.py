"""Closed icon vocabulary understood by the site's front end.

Icon names arrive as free text from Notion. They are folded onto this table
so unknown names degrade to a known default instead of a missing glyph.
"""

from __future__ import annotations

from enum import StrEnum


class Icon(StrEnum):
    """Icon identifiers rendered by the presentation layer."""

    CODE = "Code"
    TERMINAL = "Terminal"
    LIBRARY = "Library"
    SERVER = "Server"
    DATABASE = "Database"
    CLOUD = "Cloud"
    CPU = "Cpu"
    BRAIN = "Brain"
    GLOBE = "Globe"
    WRENCH = "Wrench"
    LINKEDIN = "Linkedin"
    INSTAGRAM = "Instagram"
    TWITTER = "Twitter"
    MAIL = "Mail"
    CALENDAR = "Calendar"
    MESSAGE_SQUARE = "MessageSquare"
    GITHUB = "Github"


DEFAULT_SKILL_ICON = Icon.CODE

# Lower-cased aliases seen in the skills database.
_ALIASES: dict[str, Icon] = {
    "tools": Icon.TERMINAL,
    "devtools": Icon.TERMINAL,
    "framework": Icon.LIBRARY,
    "frameworks": Icon.LIBRARY,
    "devops": Icon.SERVER,
    "db": Icon.DATABASE,
    "aws": Icon.CLOUD,
    "ai": Icon.BRAIN,
    "ml": Icon.BRAIN,
    "web": Icon.GLOBE,
    "email": Icon.MAIL,
    "x": Icon.TWITTER,
    "discord": Icon.MESSAGE_SQUARE,
}

_BY_NAME: dict[str, Icon] = {icon.value.lower(): icon for icon in Icon}


def resolve_icon_name(name: str | None, default: Icon = DEFAULT_SKILL_ICON) -> str:
    """Map a free-text icon name onto the closed icon table."""
    if not name:
        return default.value
    key = name.strip().lower().replace(" ", "").replace("-", "").replace("_", "")
    icon = _BY_NAME.get(key) or _ALIASES.get(key)
    return (icon or default).value
