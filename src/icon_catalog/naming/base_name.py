"""Base-name extraction for grouping visually similar icon variants.

``PlusCircleFilled``, ``PlusSm`` and ``PlusCircle`` all share the base name
``Plus``; the catalog uses it to place variants next to each other.
"""

from __future__ import annotations

from types import MappingProxyType

from .normalizer import split_words

# Known first words and the group they belong to. Aliases fold synonyms
# into one group (gear/cog -> Settings).
BASE_NAME_ALIASES: MappingProxyType[str, str] = MappingProxyType({
    "arrow": "Arrow",
    "chevron": "Chevron",
    "caret": "Caret",
    "plus": "Plus",
    "minus": "Minus",
    "check": "Check",
    "x": "X",
    "play": "Play",
    "pause": "Pause",
    "stop": "Stop",
    "search": "Search",
    "magnifying": "Search",
    "edit": "Edit",
    "file": "File",
    "folder": "Folder",
    "user": "User",
    "member": "Member",
    "heart": "Heart",
    "star": "Star",
    "bell": "Bell",
    "notification": "Bell",
    "lock": "Lock",
    "eye": "Eye",
    "mic": "Mic",
    "microphone": "Mic",
    "voice": "Voice",
    "video": "Video",
    "image": "Image",
    "camera": "Camera",
    "calendar": "Calendar",
    "clock": "Clock",
    "settings": "Settings",
    "gear": "Settings",
    "cog": "Settings",
    "home": "Home",
    "mail": "Mail",
    "email": "Mail",
    "chat": "Chat",
    "message": "Message",
    "copy": "Copy",
    "clipboard": "Clipboard",
    "download": "Download",
    "upload": "Upload",
    "share": "Share",
    "link": "Link",
    "trash": "Trash",
    "delete": "Delete",
    "remove": "Remove",
    "expand": "Expand",
    "collapse": "Collapse",
    "sidebar": "Sidebar",
    "menu": "Menu",
    "hamburger": "Menu",
    "dots": "Dots",
    "more": "More",
    "info": "Info",
    "help": "Help",
    "question": "Question",
    "warning": "Warning",
    "error": "Error",
    "thumb": "Thumb",
    "sparkle": "Sparkle",
    "sparkles": "Sparkle",
    "globe": "Globe",
    "world": "Globe",
    "loop": "Loop",
    "refresh": "Refresh",
    "reload": "Reload",
    "square": "Square",
    "circle": "Circle",
    "document": "Document",
    "page": "Page",
    "book": "Book",
    "shield": "Shield",
    "key": "Key",
    "pin": "Pin",
    "map": "Map",
    "chart": "Chart",
    "graph": "Graph",
    "bar": "Bar",
    "phone": "Phone",
    "mobile": "Mobile",
    "desktop": "Desktop",
    "terminal": "Terminal",
    "code": "Code",
    "openai": "OpenAI",
    "back": "Back",
    "forward": "Forward",
    "skip": "Skip",
    "rewind": "Rewind",
    "notepad": "Notepad",
    "notebook": "Notebook",
})


def base_name(identifier: str) -> str:
    """Return the group name for an icon identifier.

    Examples:
        >>> base_name("PlusCircleFilled")
        'Plus'
        >>> base_name("MagnifyingGlassSearch")
        'Search'
        >>> base_name("XCrossed")
        'X'
    """
    words = split_words(identifier)
    if not words:
        return identifier

    key = words[0].lower()
    # Very short first words ("Ai", "Up") are not meaningful on their own.
    if len(key) <= 2 and len(words) > 1 and key not in BASE_NAME_ALIASES:
        key = (words[0] + words[1]).lower()

    if key in BASE_NAME_ALIASES:
        return BASE_NAME_ALIASES[key]
    return words[0]
