"""Tests for tag vocabularies."""

from lexicon_ty.domain.types import DefType, StringFormat


class TestDefType:
    def test_eight_tags(self) -> None:
        assert {t.value for t in DefType} == {
            "query",
            "procedure",
            "subscription",
            "record",
            "string",
            "token",
            "object",
            "array",
        }

    def test_str_comparison(self) -> None:
        assert DefType.QUERY == "query"


class TestStringFormat:
    def test_hyphenated_values(self) -> None:
        assert StringFormat("at-uri") is StringFormat.AT_URI
        assert StringFormat("at-identifier") is StringFormat.AT_IDENTIFIER

    def test_all_formats(self) -> None:
        assert len(StringFormat) == 9
