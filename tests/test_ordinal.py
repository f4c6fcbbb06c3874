import pytest

from template_helpers.ordinal import BaseOrdinalizer, EnglishOrdinalizer, english, ordinal_suffix


@pytest.mark.parametrize(
    "number, suffix",
    [(1, "st"), (2, "nd"), (3, "rd"), (4, "th"), (10, "th"), (11, "th"), (12, "th"),
     (13, "th"), (14, "th"), (21, "st"), (111, "th"), (121, "st"), (-3, "rd"), (-13, "th")],
)
def test_ordinal_suffix(number: int, suffix: str) -> None:
    assert ordinal_suffix(number) == suffix


def test_english_ordinalizer() -> None:
    assert EnglishOrdinalizer().to_ordinal(42) == "42nd"
    assert english.to_ordinal(13) == "13th"


def test_base_ordinalizer_is_abstract() -> None:
    with pytest.raises(TypeError):
        BaseOrdinalizer()
