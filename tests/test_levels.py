import pytest

from levellog.levels import Level, known_level, level_ordinal, level_text


def test_levels_are_totally_ordered() -> None:
    assert Level.DEBUG < Level.INFO < Level.WARN < Level.ERROR
    assert [level.ordinal for level in Level] == [1, 2, 3, 4]


def test_text_labels_are_capitalized() -> None:
    assert [level.text for level in Level] == ["Debug", "Info", "Warn", "Error"]


@pytest.mark.parametrize(
    "value, expected",
    [
        ("debug", Level.DEBUG),
        ("INFO", Level.INFO),
        ("Warning", Level.WARN),
        (" error ", Level.ERROR),
        (3, Level.WARN),
        ("2", Level.INFO),
        (Level.ERROR, Level.ERROR),
    ],
)
def test_parse_accepts_names_and_ordinals(value, expected) -> None:
    assert Level.parse(value) is expected


@pytest.mark.parametrize("value", ["verbose", 0, 9, None, True])
def test_parse_rejects_unknown_values(value) -> None:
    with pytest.raises(ValueError):
        Level.parse(value)


def test_unknown_values_render_as_unknown_without_raising() -> None:
    assert known_level(7) is None
    assert level_ordinal(7) is None
    assert level_text(7) == "UNKNOWN"
    assert level_text("Info") == "UNKNOWN"
    assert level_text(2) == "Info"
