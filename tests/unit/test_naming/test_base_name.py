from icon_catalog.naming.base_name import base_name


def test_base_name_strips_variant_words() -> None:
    assert base_name("PlusCircleFilled") == "Plus"
    assert base_name("ChevronDownLg") == "Chevron"
    assert base_name("ArrowUpRight") == "Arrow"


def test_base_name_aliases_fold_synonyms() -> None:
    assert base_name("MagnifyingGlassSearch") == "Search"
    assert base_name("GearFilled") == "Settings"
    assert base_name("Hamburger") == "Menu"


def test_base_name_short_first_word_without_group_keeps_first_word() -> None:
    assert base_name("UpArrow") == "Up"
    assert base_name("AiSparkle") == "Ai"


def test_base_name_openai() -> None:
    assert base_name("Openai") == "OpenAI"


def test_base_name_single_letter_alias() -> None:
    assert base_name("XCrossed") == "X"


def test_base_name_unknown_word_keeps_case() -> None:
    assert base_name("ColorPalette") == "Color"


def test_base_name_empty() -> None:
    assert base_name("") == ""
