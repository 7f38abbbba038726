"""Tests for document discovery and reading."""

from pathlib import Path

from lexicon_ty.infrastructure.filesystem import find_lexicon_files, read_lexicon_file


def _touch(path: Path, text: str = "{}") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


class TestFindLexiconFiles:
    def test_recursive_and_sorted(self, tmp_path: Path) -> None:
        b = _touch(tmp_path / "com" / "b.json")
        a = _touch(tmp_path / "com" / "example" / "a.json")
        c = _touch(tmp_path / "app" / "c.json")
        assert find_lexicon_files(tmp_path) == sorted([a, b, c])

    def test_extension_filter(self, tmp_path: Path) -> None:
        keep = _touch(tmp_path / "doc.json")
        _touch(tmp_path / "README.md", "# docs")
        _touch(tmp_path / "doc.json.bak")
        assert find_lexicon_files(tmp_path) == [keep]

    def test_custom_extension(self, tmp_path: Path) -> None:
        _touch(tmp_path / "doc.json")
        lex = _touch(tmp_path / "doc.lexicon")
        assert find_lexicon_files(tmp_path, extension=".lexicon") == [lex]

    def test_compound_extension(self, tmp_path: Path) -> None:
        lex = _touch(tmp_path / "post.lex.json")
        _touch(tmp_path / "package.json")
        assert find_lexicon_files(tmp_path, extension=".lex.json") == [lex]

    def test_compound_extension_single_file_root(self, tmp_path: Path) -> None:
        lex = _touch(tmp_path / "post.lex.json")
        assert find_lexicon_files(lex, extension=".lex.json") == [lex]

    def test_extension_without_leading_dot(self, tmp_path: Path) -> None:
        doc = _touch(tmp_path / "doc.json")
        assert find_lexicon_files(tmp_path, extension="json") == [doc]

    def test_bare_extension_name_is_not_a_document(self, tmp_path: Path) -> None:
        _touch(tmp_path / ".json")
        assert find_lexicon_files(tmp_path) == []

    def test_excluded_directories(self, tmp_path: Path) -> None:
        keep = _touch(tmp_path / "lexicons" / "a.json")
        _touch(tmp_path / "node_modules" / "pkg" / "package.json")
        _touch(tmp_path / ".git" / "x.json")
        assert find_lexicon_files(tmp_path) == [keep]

    def test_custom_exclude(self, tmp_path: Path) -> None:
        keep = _touch(tmp_path / "src" / "a.json")
        _touch(tmp_path / "build" / "a.json")
        assert find_lexicon_files(tmp_path, exclude=["build"]) == [keep]

    def test_single_file_root(self, tmp_path: Path) -> None:
        doc = _touch(tmp_path / "doc.json")
        assert find_lexicon_files(doc) == [doc]

    def test_single_file_wrong_extension(self, tmp_path: Path) -> None:
        doc = _touch(tmp_path / "doc.txt")
        assert find_lexicon_files(doc) == []

    def test_missing_root(self, tmp_path: Path) -> None:
        assert find_lexicon_files(tmp_path / "missing") == []

    def test_empty_directory(self, tmp_path: Path) -> None:
        assert find_lexicon_files(tmp_path) == []

    def test_fixture_corpus(self, fixtures_dir: Path) -> None:
        files = find_lexicon_files(fixtures_dir)
        assert fixtures_dir / "com" / "example" / "feed" / "post.json" in files


class TestReadLexiconFile:
    def test_utf8(self, tmp_path: Path) -> None:
        doc = _touch(tmp_path / "doc.json", '{"description": "café"}')
        assert read_lexicon_file(doc) == '{"description": "café"}'
