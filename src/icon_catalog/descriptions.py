"""Human-readable icon descriptions for the generated documentation.

Descriptions use the same substring matching as categorization but their own
ordered table: a rule matches on any of its keywords, then the first matching
refinement picks a more specific text. Identifiers no rule matches are
described from their display name ("ColorPalette" -> "Color Palette icon").
"""

from __future__ import annotations

from typing import NamedTuple

from icon_catalog.naming.normalizer import to_display_name


class Refinement(NamedTuple):
    keywords: tuple[str, ...]
    text: str


class DescriptionRule(NamedTuple):
    keywords: tuple[str, ...]
    text: str
    refinements: tuple[Refinement, ...] = ()


def _any(name: str, keywords: tuple[str, ...]) -> bool:
    return any(keyword in name for keyword in keywords)


DESCRIPTION_RULES: tuple[DescriptionRule, ...] = (
    DescriptionRule(
        ("arrow", "chevron", "caret", "back", "forward", "next", "previous"),
        "Navigation arrow icon",
        (
            Refinement(("left",), "Arrow pointing left for navigation"),
            Refinement(("right",), "Arrow pointing right for navigation"),
            Refinement(("up",), "Arrow pointing up for navigation"),
            Refinement(("down",), "Arrow pointing down for navigation"),
        ),
    ),
    DescriptionRule(
        ("add", "plus", "create", "new"),
        "Add or create new item icon",
        (
            Refinement(("member", "user"), "Add user or member icon"),
            Refinement(("source",), "Add source icon"),
        ),
    ),
    DescriptionRule(
        ("delete", "remove", "minus", "clear", "trash"),
        "Delete or remove item icon",
        (Refinement(("account",), "Delete account icon"),),
    ),
    DescriptionRule(("edit", "pencil", "modify", "change", "write"), "Edit or modify content icon"),
    DescriptionRule(("copy", "duplicate", "clone", "clipboard"), "Copy or duplicate item icon"),
    DescriptionRule(("download", "save", "export"), "Download or save file icon"),
    DescriptionRule(("upload", "import"), "Upload or import file icon"),
    DescriptionRule(("search", "magnify", "find", "telescope"), "Search or find content icon"),
    DescriptionRule(
        ("play", "pause", "stop", "rewind", "forward", "skip"),
        "Media control icon",
        (
            Refinement(("play",), "Play media icon"),
            Refinement(("pause",), "Pause media icon"),
            Refinement(("stop",), "Stop media icon"),
        ),
    ),
    DescriptionRule(
        ("video", "caption", "image"),
        "Media content icon",
        (
            Refinement(("caption",), "Video or image caption icon"),
            Refinement(("video",), "Video content icon"),
            Refinement(("image",), "Image or picture icon"),
        ),
    ),
    DescriptionRule(
        ("mic", "microphone", "voice", "sound", "audio", "speak", "speech"),
        "Microphone or voice recording icon",
        (
            Refinement(("off", "mute"), "Microphone or sound muted icon"),
            Refinement(("on", "filled"), "Microphone or sound enabled icon"),
        ),
    ),
    DescriptionRule(
        ("chat", "message", "mail", "email", "comment", "forum", "notification", "bell"),
        "Communication icon",
        (
            Refinement(("bell",), "Notification bell icon"),
            Refinement(("chat",), "Chat or messaging icon"),
            Refinement(("mail", "email"), "Email or mail icon"),
        ),
    ),
    DescriptionRule(
        ("file", "document", "folder", "archive", "clipboard", "page", "notebook", "notepad"),
        "File or document icon",
        (
            Refinement(("folder",), "Folder icon"),
            Refinement(("notebook", "notepad"), "Notebook or notepad icon"),
        ),
    ),
    DescriptionRule(
        ("user", "member", "person", "people", "group", "avatar", "profile"),
        "User or member icon",
        (
            Refinement(("avatar",), "User avatar or profile icon"),
            Refinement(("group", "people"), "Group of users icon"),
        ),
    ),
    DescriptionRule(
        ("settings", "config", "gear", "preferences", "options", "customize"),
        "Settings or configuration icon",
    ),
    DescriptionRule(("check", "success", "complete", "done"), "Success or completed action icon"),
    DescriptionRule(("error", "warning", "alert", "exclamation"), "Error or warning icon"),
    DescriptionRule(("info", "help", "question"), "Information or help icon"),
    DescriptionRule(
        ("agent", "assistant", "ai", "brain", "automation", "bot", "sparkle", "bolt", "flash"),
        "AI or automation icon",
        (
            Refinement(("agent", "assistant"), "AI agent or assistant icon"),
            Refinement(("sparkle", "bolt"), "AI or magic feature icon"),
        ),
    ),
    DescriptionRule(
        ("chart", "graph", "analytics", "data", "statistics", "metrics", "bar"),
        "Analytics or data visualization icon",
    ),
    DescriptionRule(
        ("menu", "hamburger", "sidebar", "collapse", "expand", "minimize", "maximize", "dock", "dropdown"),
        "Interface element icon",
        (
            Refinement(("menu", "hamburger"), "Menu or hamburger icon"),
            Refinement(("collapse", "expand"), "Collapse or expand icon"),
        ),
    ),
    DescriptionRule(
        ("eye", "view", "visible", "hidden", "show", "hide"),
        "View or show content icon",
        (Refinement(("off", "closed"), "Hide or view hidden icon"),),
    ),
    DescriptionRule(
        ("link", "chain", "connect", "external"),
        "Link or connection icon",
        (
            Refinement(("external",), "External link icon"),
            Refinement(("disabled", "off"), "Link disabled icon"),
        ),
    ),
    DescriptionRule(("home",), "Home or main page icon"),
    DescriptionRule(
        ("history", "time", "clock"),
        "Time-related icon",
        (
            Refinement(("history",), "History or previous actions icon"),
            Refinement(("clock", "time"), "Time or clock icon"),
        ),
    ),
    DescriptionRule(("filter",), "Filter or search filter icon"),
    DescriptionRule(
        ("heart", "star", "bookmark", "pin", "flag", "tag", "badge"),
        "Symbol or marker icon",
        (
            Refinement(("heart",), "Favorite or like icon"),
            Refinement(("star",), "Star or featured icon"),
            Refinement(("bookmark", "pin"), "Bookmark or pin icon"),
        ),
    ),
    DescriptionRule(("calendar", "date"), "Calendar or date icon"),
    DescriptionRule(
        ("lock", "key", "secure", "private", "shield", "protection"),
        "Security or protection icon",
        (
            Refinement(("lock", "key"), "Lock or security icon"),
            Refinement(("shield",), "Security shield icon"),
        ),
    ),
    DescriptionRule(("code", "function", "variable", "script"), "Code or development icon"),
    DescriptionRule(("grid", "layout", "table"), "Grid or layout icon"),
    DescriptionRule(("globe", "world", "earth", "internet"), "Globe or world icon"),
    DescriptionRule(
        ("light", "dark", "moon", "sun"),
        "Theme or mode icon",
        (
            Refinement(("light",), "Light mode icon"),
            Refinement(("dark", "moon"), "Dark mode icon"),
        ),
    ),
    DescriptionRule(("music", "sound"), "Music or sound icon"),
    DescriptionRule(
        ("education", "graduate", "graduation", "book", "learning"),
        "Education or learning icon",
    ),
    DescriptionRule(("business", "building", "workspace"), "Business or workspace icon"),
)


def describe(identifier: str) -> str:
    """Generate a human-readable description for an icon."""
    name = identifier.lower()
    for rule in DESCRIPTION_RULES:
        if not _any(name, rule.keywords):
            continue
        for refinement in rule.refinements:
            if _any(name, refinement.keywords):
                return refinement.text
        return rule.text

    return f"{to_display_name(identifier)} icon"
