import pytest

from icon_catalog.naming.normalizer import normalize
from icon_catalog.tagging.expander import expand_tags, render_tags
from icon_catalog.tagging.synonyms import DEFAULT_SYNONYMS


def test_expand_tags_add_user() -> None:
    tags = expand_tags("AddUser")
    assert {"add", "user", "plus", "create", "new", "person", "people"} <= tags


def test_expand_tags_without_synonyms_keeps_words() -> None:
    assert expand_tags("Widget123XYZ") == {"widget123", "xyz"}


def test_expand_tags_many_to_many_collapses_duplicates() -> None:
    # Both triggers contribute "person" and "people".
    tags = expand_tags("UserMember")
    assert {"person", "people", "account", "profile"} <= tags
    assert len(tags) == len(set(tags))


def test_expand_tags_single_trigger_contributes_several_tags() -> None:
    assert {"minus", "trash", "clear", "erase"} <= expand_tags("RemoveItem")


def test_expand_tags_acronym_trigger() -> None:
    assert {"api", "key", "icon", "integration", "password", "auth"} <= expand_tags("APIKeyIcon")


def test_expand_tags_hyphenated_identifier() -> None:
    assert {"x", "crossed", "close", "cancel", "disabled"} <= expand_tags("x-crossed")


def test_expand_tags_does_not_match_substrings() -> None:
    # Tag expansion is token-based, unlike classification.
    assert "bubble" not in expand_tags("Chatgpt")


@pytest.mark.parametrize(
    "identifier",
    ["ArrowUpRight", "TrashCan", "SettingsGear", "ChatNotificationBell", "Widget123XYZ", "X"],
)
def test_expand_tags_superset_of_normalized_words(identifier: str) -> None:
    tags = expand_tags(identifier)
    assert tags
    assert set(normalize(identifier)) <= tags


def test_expand_tags_is_deterministic() -> None:
    assert expand_tags("ArrowUpRight") == expand_tags("ArrowUpRight")


def test_expand_tags_empty_identifier() -> None:
    assert expand_tags("") == {""}


def test_expand_tags_custom_table() -> None:
    synonyms = {"widget": ("component", "block")}
    assert expand_tags("WidgetSm", synonyms) == {"widget", "sm", "component", "block"}


def test_default_synonyms_are_immutable() -> None:
    with pytest.raises(TypeError):
        DEFAULT_SYNONYMS["new-trigger"] = ("tag",)


def test_default_synonyms_lowercase() -> None:
    for trigger, tags in DEFAULT_SYNONYMS.items():
        assert trigger == trigger.lower()
        assert all(tag == tag.lower() for tag in tags)


def test_render_tags_sorted_and_comma_joined() -> None:
    assert render_tags({"up", "arrow", "top"}) == "arrow, top, up"


# Expansions every icon set relied on before the table was extended.
BASE_EXPANSIONS = {
    "x": {"close", "delete", "remove", "cancel", "exit"},
    "crossed": {"close", "delete", "remove"},
    "cross": {"close", "delete", "remove"},
    "arrow": {"direction", "navigation"},
    "down": {"bottom"},
    "up": {"top"},
    "left": {"back", "previous"},
    "right": {"forward", "next"},
    "add": {"plus", "create", "new"},
    "remove": {"minus", "trash"},
    "delete": {"minus", "trash"},
    "member": {"person", "people"},
    "user": {"person", "people"},
    "settings": {"config", "gear", "preferences", "options"},
    "search": {"find", "magnify"},
    "edit": {"modify", "pencil", "change"},
    "save": {"store", "download"},
    "upload": {"import", "add"},
    "download": {"export", "save"},
}


@pytest.mark.parametrize("trigger", sorted(BASE_EXPANSIONS))
def test_default_synonyms_cover_base_expansions(trigger: str) -> None:
    assert BASE_EXPANSIONS[trigger] <= set(DEFAULT_SYNONYMS[trigger])


def test_expand_tags_upload_and_download() -> None:
    assert {"upload", "file", "import", "add"} <= expand_tags("UploadFile")
    assert {"download", "file", "export", "save"} <= expand_tags("DownloadFile")
