"""Synonym table used to expand icon search tags.

Each trigger word maps to the extra tags it contributes when it appears among
an identifier's normalized words. The table is many-to-many: several triggers
may contribute the same tag.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

SynonymTable = Mapping[str, tuple[str, ...]]


def _table(groups: dict[tuple[str, ...], tuple[str, ...]]) -> SynonymTable:
    # Triggers sharing the same expansion are declared together.
    table: dict[str, tuple[str, ...]] = {}
    for triggers, tags in groups.items():
        for trigger in triggers:
            table[trigger] = tags
    return MappingProxyType(table)


DEFAULT_SYNONYMS: SynonymTable = _table({
    # Close / cancel
    ("x",): ("close", "delete", "remove", "cancel", "exit", "dismiss"),
    ("crossed", "cross"): ("close", "delete", "remove", "disabled"),

    # Navigation
    ("arrow",): ("direction", "navigation", "pointer"),
    ("chevron",): ("arrow", "expand", "collapse", "caret"),
    ("caret",): ("chevron", "dropdown", "expand"),
    ("down",): ("bottom", "dropdown", "below"),
    ("up",): ("top", "above", "upward"),
    ("left",): ("back", "previous", "west"),
    ("right",): ("forward", "next", "east"),
    ("home",): ("house", "main", "start"),
    ("globe", "world", "earth"): ("international", "web", "internet", "language"),

    # Actions
    ("add",): ("plus", "create", "new", "insert"),
    ("plus",): ("add", "create", "new"),
    ("create", "new"): ("add", "plus"),
    ("remove", "delete"): ("minus", "trash", "clear", "erase"),
    ("trash",): ("delete", "bin", "garbage", "remove"),
    ("minus",): ("remove", "subtract", "decrease"),
    ("edit",): ("modify", "pencil", "change", "update", "write"),
    ("pencil",): ("edit", "write", "draw"),
    ("copy",): ("duplicate", "clone", "clipboard"),
    ("paste",): ("clipboard", "insert"),
    ("cut",): ("scissors", "trim"),
    ("save",): ("store", "download", "disk", "floppy"),
    ("saved",): ("bookmark", "favorite", "favourite", "store"),
    ("upload",): ("import", "add", "send", "publish"),
    ("download",): ("export", "save", "receive", "get"),
    ("share",): ("send", "forward", "social"),
    ("send",): ("share", "submit", "arrow"),
    ("search",): ("find", "magnify", "lookup", "glass"),
    ("magnify", "zoom"): ("search", "glass", "enlarge"),
    ("eye",): ("view", "visible", "watch", "see", "preview"),
    ("view",): ("eye", "visible", "show"),
    ("hide", "hidden"): ("invisible", "conceal", "off"),
    ("filter",): ("sort", "funnel", "refine"),
    ("undo",): ("revert", "back", "restore"),
    ("redo",): ("repeat", "forward"),
    ("refresh",): ("reload", "sync", "update", "rotate"),

    # Users
    ("member", "user"): ("person", "people", "account", "profile"),
    ("people", "members", "users"): ("group", "team", "persons"),
    ("avatar",): ("user", "profile", "photo"),

    # Settings
    ("settings",): ("config", "gear", "preferences", "options", "cog"),
    ("gear", "cog"): ("settings", "config", "options"),

    # Communication
    ("chat", "message"): ("bubble", "comment", "talk", "conversation"),
    ("mail", "email"): ("envelope", "letter", "inbox"),
    ("bell",): ("notification", "alert", "ring"),
    ("phone",): ("call", "telephone", "mobile", "device"),

    # Media
    ("video",): ("movie", "film", "camera", "record"),
    ("play",): ("start", "triangle", "media", "run"),
    ("pause",): ("hold", "stop", "wait"),
    ("stop",): ("end", "square", "halt"),
    ("skip",): ("next", "forward"),
    ("rewind",): ("backward", "previous"),
    ("mic", "microphone"): ("voice", "audio", "record", "speak"),
    ("sound", "audio"): ("volume", "speaker", "music"),
    ("mute",): ("silent", "off", "quiet"),
    ("image", "picture", "photo"): ("gallery", "media", "snapshot"),
    ("camera",): ("photo", "capture", "snapshot"),

    # Files
    ("file",): ("document", "page", "paper"),
    ("folder",): ("directory", "collection", "organize"),
    ("document",): ("file", "page", "text"),
    ("clipboard",): ("paste", "copy", "board"),

    # Interface
    ("menu",): ("hamburger", "navigation", "list", "bars"),
    ("hamburger",): ("menu", "bars", "navigation"),
    ("sidebar",): ("panel", "drawer", "navigation"),
    ("expand",): ("enlarge", "maximize", "fullscreen", "open"),
    ("collapse",): ("minimize", "shrink", "close"),
    ("more", "dots"): ("menu", "options", "ellipsis", "overflow"),
    ("grid",): ("layout", "tiles", "gallery"),
    ("list",): ("bullets", "items", "rows"),
    ("table",): ("grid", "data", "spreadsheet"),

    # Status
    ("check", "checkmark"): ("done", "complete", "success", "ok", "tick"),
    ("success",): ("check", "done", "complete"),
    ("error",): ("fail", "wrong", "problem"),
    ("warning", "alert"): ("caution", "attention", "exclamation"),
    ("info",): ("information", "about", "help"),
    ("help", "question"): ("support", "faq", "ask"),
    ("loading",): ("spinner", "progress", "wait"),

    # Security
    ("lock",): ("secure", "private", "password", "closed"),
    ("unlock",): ("open", "access", "unsecure"),
    ("key",): ("password", "access", "security", "auth"),
    ("shield",): ("security", "protect", "safe"),

    # Time
    ("clock",): ("time", "hour", "schedule", "watch"),
    ("calendar",): ("date", "schedule", "event", "day"),
    ("history",): ("past", "recent", "log", "activity"),

    # Symbols
    ("heart",): ("love", "like", "favorite", "favourite"),
    ("star",): ("favorite", "rating", "important", "featured"),
    ("bookmark",): ("save", "favorite", "mark"),
    ("pin",): ("location", "marker", "attach", "fix"),
    ("flag",): ("report", "mark", "important"),
    ("tag",): ("label", "category", "mark"),

    # Links
    ("link",): ("chain", "connect", "url", "hyperlink"),
    ("external",): ("outside", "new window", "open"),

    # Code
    ("code",): ("programming", "developer", "brackets", "script"),
    ("terminal",): ("console", "command", "cli", "shell"),
    ("api",): ("integration", "connect", "developer"),

    # AI
    ("ai",): ("artificial", "intelligence", "smart", "machine"),
    ("sparkle", "sparkles"): ("magic", "ai", "generate", "stars"),
    ("bolt", "lightning"): ("fast", "quick", "power", "flash"),
    ("brain",): ("thinking", "intelligence", "mind", "smart"),

    # Formatting
    ("bold",): ("strong", "format", "text"),
    ("italic",): ("slant", "format", "text"),
    ("underline",): ("format", "text"),
    ("align",): ("format", "text", "justify"),

    # Dimensions
    ("aspect",): ("ratio", "size", "dimensions", "resize"),
    ("ratio",): ("aspect", "proportion", "size"),
    ("resize",): ("scale", "size", "dimensions"),
    ("crop",): ("cut", "trim", "image"),
    ("rotate",): ("turn", "spin", "orientation"),
    ("flip",): ("mirror", "reflect", "horizontal", "vertical"),

    # Theme
    ("brightness",): ("light", "dark", "adjust", "sun"),
    ("contrast",): ("adjust", "light", "dark"),
    ("sun",): ("bright", "light", "day", "mode"),
    ("moon",): ("dark", "night", "mode"),

    # Layers
    ("layer", "layers"): ("stack", "overlap", "depth"),
    ("bring", "front"): ("layer", "forward", "above"),
    ("back",): ("layer", "behind", "below"),
    ("stack",): ("layers", "pile", "group"),

    # Text
    ("text",): ("type", "font", "write"),
    ("font",): ("text", "type", "letter"),
    ("quote",): ("text", "cite", "speech"),

    # Shapes
    ("circle",): ("shape", "round", "oval"),
    ("square",): ("shape", "box", "rectangle"),
    ("rectangle",): ("shape", "box", "square"),
    ("triangle",): ("shape", "arrow"),
    ("polygon",): ("shape", "multi"),
})
