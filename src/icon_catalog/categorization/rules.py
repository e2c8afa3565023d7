"""Deterministic icon categorization.

Every icon in the generated library is placed in exactly one category so the
catalog can be browsed by group. Categories are inferred from the icon
identifier alone using ordered keyword rules:

- the identifier is lowercased once
- each rule is a list of keywords tested by substring containment, so a word
  embedded in a longer token still matches ("chat" in "ChatGPT")
- rules are evaluated in table order and the first match wins

The first-match ordering decides every overlap (``DownloadArrow`` is
Navigation, ``ClockHistory`` is Interface) and downstream catalog grouping
depends on it. Keep the table order when extending it.
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple, Sequence


class Category(str, Enum):
    """Public taxonomy, in rule evaluation order."""

    NAVIGATION = "Navigation"
    ACTIONS = "Actions"
    COMMUNICATION = "Communication"
    MEDIA = "Media"
    FILES = "Files"
    USERS = "Users"
    SETTINGS = "Settings"
    STATUS = "Status"
    AI_AUTOMATION = "AI & Automation"
    ANALYTICS = "Analytics"
    INTERFACE = "Interface"
    SYMBOLS = "Symbols"
    TIME = "Time"
    SECURITY = "Security"
    OTHER = "Other"


CATEGORIES: tuple[Category, ...] = tuple(Category)


class Rule(NamedTuple):
    category: Category
    keywords: tuple[str, ...]

    def matches(self, name: str) -> bool:
        """``name`` must already be lowercased."""
        return any(keyword in name for keyword in self.keywords)


RuleTable = Sequence[Rule]


# Ordering matters: earlier matches win.
DEFAULT_RULES: tuple[Rule, ...] = (
    Rule(Category.NAVIGATION, (
        "arrow", "chevron", "caret", "back", "forward", "next", "previous",
        "home", "openleft", "openright", "globe", "world", "earth",
    )),
    Rule(Category.ACTIONS, (
        "add", "plus", "create", "new",
        "delete", "remove", "minus", "clear", "trash", "cleanup",
        "edit", "pencil", "modify", "change", "write",
        "copy", "duplicate", "clone",
        "download", "save", "export",
        "upload", "import",
        "search", "magnify", "find", "telescope",
        "eye", "view", "visible", "hidden", "show", "hide",
        "filter",
        "logout", "exit", "enterlogin",
    )),
    Rule(Category.COMMUNICATION, (
        "chat", "message", "mail", "email", "comment", "forum",
        "notification", "bell", "messaging",
    )),
    Rule(Category.MEDIA, (
        "video", "caption", "pictureinpicture",
        "image", "picture", "photo", "camera",
        "mic", "microphone", "voice", "sound", "audio", "speak", "speech", "music",
        "play", "pause", "stop", "rewind", "skip", "loop",
    )),
    Rule(Category.FILES, (
        "file", "document", "folder", "archive", "page", "notebook", "notepad",
        "clipboard",
    )),
    Rule(Category.USERS, (
        "user", "member", "person", "people", "group", "avatar", "profile",
    )),
    Rule(Category.SETTINGS, (
        "settings", "config", "gear", "preferences", "options", "customize",
    )),
    Rule(Category.STATUS, (
        "check", "success", "complete", "done",
        "error", "warning", "alert", "exclamation",
        "info", "help", "question",
    )),
    Rule(Category.AI_AUTOMATION, (
        "agent", "assistant", "ai", "brain", "automation", "bot",
        "sparkle", "bolt", "flash", "inspiration", "gpt", "sora",
    )),
    Rule(Category.ANALYTICS, (
        "chart", "graph", "analytics", "data", "statistics", "metrics", "bar",
    )),
    Rule(Category.INTERFACE, (
        "menu", "hamburger", "sidebar", "collapse", "expand", "minimize", "maximize",
        "dock", "dropdown", "dots", "more",
        "link", "chain", "connect", "external",
        "code", "function", "variable", "script",
        "grid", "layout", "table",
        "history", "managehistory",
        "lightmode", "darkmode", "moon", "sun", "colortheme", "systemmode",
        "cursor", "desktop", "mobile",
    )),
    Rule(Category.SYMBOLS, (
        "heart", "star", "bookmark", "pin", "flag", "tag", "badge", "wreath",
    )),
    Rule(Category.TIME, (
        "clock", "time", "calendar", "date",
    )),
    Rule(Category.SECURITY, (
        "lock", "key", "secure", "private", "shield", "protection",
    )),
)


def classify(identifier: str, rules: RuleTable = DEFAULT_RULES) -> Category:
    """Infer the category of an icon from its identifier.

    Args:
        identifier: Raw icon identifier (any case, no normalization needed).
        rules: Ordered rule table (default: DEFAULT_RULES).

    Returns:
        The category of the first matching rule, or Category.OTHER.
    """
    name = identifier.lower()
    for rule in rules:
        if rule.matches(name):
            return rule.category
    return Category.OTHER


def matching_categories(identifier: str, rules: RuleTable = DEFAULT_RULES) -> list[Category]:
    """Return every category whose rule matches, in rule order.

    ``classify`` only keeps the first entry; this is used to audit overlaps
    between keyword sets.
    """
    name = identifier.lower()
    return [rule.category for rule in rules if rule.matches(name)]


def category_rank(category: Category, rules: RuleTable = DEFAULT_RULES) -> int:
    """Position of ``category`` in the rule table; Other always sorts last."""
    for index, rule in enumerate(rules):
        if rule.category is category:
            return index
    return len(rules)
