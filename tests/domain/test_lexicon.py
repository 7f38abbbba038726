"""Tests for the Lexicon document model and definition dispatch."""

from typing import Any

import pytest

from helpers import minimal_lexicon
from lexicon_ty.domain.decode import LexiconDecodeError, decode_def, decode_lexicon_data
from lexicon_ty.domain.endpoints import Procedure, Query, Record, Subscription
from lexicon_ty.domain.fields import Array, Object
from lexicon_ty.domain.lexicon import MAX_LEXICON_VERSION
from lexicon_ty.domain.primitives import StringTy, Token
from lexicon_ty.domain.types import DefType

MINIMAL_DEFS: dict[str, tuple[dict[str, Any], type]] = {
    "query": ({"type": "query"}, Query),
    "procedure": ({"type": "procedure"}, Procedure),
    "subscription": ({"type": "subscription"}, Subscription),
    "record": (
        {"type": "record", "key": "tid", "record": {"type": "object", "properties": {}}},
        Record,
    ),
    "string": ({"type": "string"}, StringTy),
    "token": ({"type": "token"}, Token),
    "object": ({"type": "object", "properties": {}}, Object),
    "array": ({"type": "array", "items": {"type": "string"}}, Array),
}


class TestDefDispatch:
    @pytest.mark.parametrize("tag", sorted(MINIMAL_DEFS))
    def test_each_tag_selects_its_variant(self, tag: str) -> None:
        node, expected = MINIMAL_DEFS[tag]
        lexicon = decode_lexicon_data(minimal_lexicon(node))
        assert type(lexicon.defs["main"]) is expected

    @pytest.mark.parametrize("tag", sorted(MINIMAL_DEFS))
    def test_decode_def(self, tag: str) -> None:
        node, expected = MINIMAL_DEFS[tag]
        assert type(decode_def(node)) is expected

    def test_every_def_type_covered(self) -> None:
        assert set(MINIMAL_DEFS) == {t.value for t in DefType}


class TestLexicon:
    def test_top_level_fields(self) -> None:
        lexicon = decode_lexicon_data(
            {
                "lexicon": 1,
                "id": "com.example.thing",
                "description": "Things.",
                "defs": {"main": {"type": "token"}},
            }
        )
        assert lexicon.lexicon == 1
        assert lexicon.id == "com.example.thing"
        assert lexicon.description == "Things."

    def test_description_optional(self) -> None:
        lexicon = decode_lexicon_data(minimal_lexicon({"type": "token"}))
        assert lexicon.description is None

    def test_empty_defs(self) -> None:
        lexicon = decode_lexicon_data({"lexicon": 1, "id": "com.example.empty", "defs": {}})
        assert lexicon.defs == {}
        assert lexicon.main is None

    def test_main(self) -> None:
        lexicon = decode_lexicon_data(minimal_lexicon({"type": "query"}))
        assert isinstance(lexicon.main, Query)

    def test_def_types(self) -> None:
        lexicon = decode_lexicon_data(
            {
                "lexicon": 1,
                "id": "com.example.mixed",
                "defs": {
                    "main": {"type": "query"},
                    "view": {"type": "object", "properties": {}},
                    "marker": {"type": "token"},
                },
            }
        )
        assert lexicon.def_types() == {
            "main": DefType.QUERY,
            "view": DefType.OBJECT,
            "marker": DefType.TOKEN,
        }

    def test_references_stay_symbolic(self) -> None:
        lexicon = decode_lexicon_data(
            {
                "lexicon": 1,
                "id": "com.example.cycle",
                "defs": {
                    "a": {"type": "object", "properties": {"b": {"type": "ref", "ref": "#b"}}},
                    "b": {"type": "object", "properties": {"a": {"type": "ref", "ref": "#a"}}},
                    "c": {
                        "type": "object",
                        "properties": {"x": {"type": "ref", "ref": "com.example.missing#nope"}},
                    },
                },
            }
        )
        a = lexicon.defs["a"]
        assert isinstance(a, Object)
        assert a.properties["b"].reference == "#b"  # type: ignore[union-attr]

    def test_lexicon_frozen(self) -> None:
        lexicon = decode_lexicon_data(minimal_lexicon({"type": "token"}))
        with pytest.raises(Exception):
            lexicon.id = "com.example.other"  # type: ignore[misc]

    def test_required_list_cannot_be_extended(self) -> None:
        record = {
            "type": "record",
            "key": "tid",
            "record": {"type": "object", "required": ["text"], "properties": {}},
        }
        main = decode_lexicon_data(minimal_lexicon(record)).main
        assert isinstance(main, Record)
        assert main.record.required == ("text",)
        with pytest.raises(AttributeError):
            main.record.required.append("extra")  # type: ignore[union-attr]


class TestLexiconVersion:
    def test_largest_version(self) -> None:
        lexicon = decode_lexicon_data(
            {"lexicon": MAX_LEXICON_VERSION, "id": "com.example.x", "defs": {}}
        )
        assert lexicon.lexicon == 2**32 - 1

    @pytest.mark.parametrize("version", [2**32, 99999999999999999999999, -1])
    def test_out_of_range_version(self, version: int) -> None:
        with pytest.raises(LexiconDecodeError) as exc_info:
            decode_lexicon_data({"lexicon": version, "id": "com.example.x", "defs": {}})
        assert exc_info.value.path == ("lexicon",)
