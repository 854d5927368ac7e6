from pathlib import Path

import pytest

from transcribe_turbo.analysis.keywords import (
    CATEGORIES,
    KeywordCatalog,
    build_catalog,
    load_custom_keywords,
    parse_keywords,
)
from transcribe_turbo.errors import KeywordFileError


def test_catalog_has_eight_lowercase_categories(catalog: KeywordCatalog) -> None:
    names = [name for name, _ in catalog.categories()]
    assert names == list(CATEGORIES)
    assert len(names) == 8
    for _, phrases in catalog.categories():
        assert phrases
        assert all(p == p.lower() for p in phrases)


def test_with_custom_appends_to_general_only(catalog: KeywordCatalog) -> None:
    extended = catalog.with_custom(["Green New Deal"])
    assert extended.general[-1] == "Green New Deal"
    assert extended.economy == catalog.economy
    assert len(extended) == len(catalog) + 1
    # original catalog is untouched
    assert "Green New Deal" not in catalog.general


def test_parse_keywords_skips_blanks_and_comments() -> None:
    content = "# campaign terms\n\n  Green New Deal  \n#ignored\ninfrastructure bill\n   \n"
    assert parse_keywords(content) == ["Green New Deal", "infrastructure bill"]


def test_load_custom_keywords(tmp_path: Path) -> None:
    path = tmp_path / "keywords.txt"
    path.write_text("# header\nBuild Back Better\n\nfilibuster\n", encoding="utf-8")
    assert load_custom_keywords(path) == ["Build Back Better", "filibuster"]


def test_unreadable_keyword_file_raises(tmp_path: Path) -> None:
    directory = tmp_path / "keywords.txt"
    directory.mkdir()
    with pytest.raises(KeywordFileError):
        load_custom_keywords(directory)


def test_undecodable_keyword_file_raises(tmp_path: Path) -> None:
    path = tmp_path / "keywords.txt"
    path.write_bytes(b"\xff\xfe\xfa not utf-8")
    with pytest.raises(KeywordFileError):
        build_catalog(path)


def test_build_catalog_defaults() -> None:
    assert build_catalog(None) == KeywordCatalog()


def test_build_catalog_missing_file_falls_back(tmp_path: Path) -> None:
    assert build_catalog(tmp_path / "absent.txt") == KeywordCatalog()


def test_build_catalog_with_file(tmp_path: Path) -> None:
    path = tmp_path / "keywords.txt"
    path.write_text("filibuster\n", encoding="utf-8")
    catalog = build_catalog(path)
    assert catalog.general[-1] == "filibuster"


def test_keyword_file_with_byte_order_mark(tmp_path: Path) -> None:
    path = tmp_path / "keywords.txt"
    path.write_bytes("filibuster\nGreen New Deal\n".encode("utf-8-sig"))
    assert load_custom_keywords(path) == ["filibuster", "Green New Deal"]
