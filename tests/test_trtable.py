import pytest

from wordgen.core.trtable import TranslationTable
from wordgen.utils.exceptions import TableLoadError


def write_table(tmp_path, text):
    path = tmp_path / "table.yaml"
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_get_returns_alternatives_or_none() -> None:
    table = TranslationTable({"a": "4 @", "o": ["0", "()"]})
    assert table.get("a") == ("4", "@")
    assert table.get("o") == ("0", "()")
    assert table.get("b") is None
    assert "a" in table
    assert "b" not in table
    assert len(table) == 2


def test_repeated_keys_accumulate_in_order() -> None:
    table = TranslationTable.from_blocks([{"a": "4"}, {"e": "3"}, {"a": "@ /-\\"}])
    assert table.get("a") == ("4", "@", "/-\\")
    assert table.get("e") == ("3",)


def test_load_multiple_documents(tmp_path) -> None:
    path = write_table(tmp_path, "a: 4 @\ns: 5\n---\na: /-\\\n")
    table = TranslationTable.load(path)
    assert table.get("a") == ("4", "@", "/-\\")
    assert table.get("s") == ("5",)


def test_load_keeps_numbers_and_booleans_as_text(tmp_path) -> None:
    path = write_table(tmp_path, "0: o O\n1: l i\no: 0\ny: yes\n")
    table = TranslationTable.load(path)
    assert table.get("0") == ("o", "O")
    assert table.get("1") == ("l", "i")
    assert table.get("o") == ("0",)
    assert table.get("y") == ("yes",)


def test_load_accepts_lists(tmp_path) -> None:
    path = write_table(tmp_path, "a:\n  - '4'\n  - '@'\n")
    assert TranslationTable.load(path).get("a") == ("4", "@")


def test_multi_character_key_is_rejected(tmp_path) -> None:
    path = write_table(tmp_path, "a: 4\nab: x\n")
    with pytest.raises(TableLoadError, match="single letter"):
        TranslationTable.load(path)


def test_empty_file_is_rejected(tmp_path) -> None:
    path = write_table(tmp_path, "# nothing here\n")
    with pytest.raises(TableLoadError, match="does not contain any data"):
        TranslationTable.load(path)


def test_missing_file_is_rejected(tmp_path) -> None:
    with pytest.raises(TableLoadError, match="could not read"):
        TranslationTable.load(str(tmp_path / "missing.yaml"))


def test_invalid_yaml_is_rejected(tmp_path) -> None:
    path = write_table(tmp_path, "a: [4, @\n")
    with pytest.raises(TableLoadError, match="could not parse"):
        TranslationTable.load(path)


def test_non_mapping_document_is_rejected(tmp_path) -> None:
    path = write_table(tmp_path, "- a\n- b\n")
    with pytest.raises(TableLoadError, match="mapping"):
        TranslationTable.load(path)


def test_key_without_alternatives_is_rejected(tmp_path) -> None:
    path = write_table(tmp_path, "a:\n")
    with pytest.raises(TableLoadError, match="no alternatives"):
        TranslationTable.load(path)


def test_nested_value_is_rejected() -> None:
    with pytest.raises(TableLoadError):
        TranslationTable({"a": {"b": "c"}})


def test_key_repeated_inside_one_document_accumulates(tmp_path) -> None:
    path = write_table(tmp_path, "a: 4\ne: 3\na: '@'\n")
    table = TranslationTable.load(path)
    assert table.get("a") == ("4", "@")
    assert table.get("e") == ("3",)
    assert len(table) == 2


def test_nested_mapping_value_in_file_is_rejected(tmp_path) -> None:
    path = write_table(tmp_path, "a:\n  b: c\n")
    with pytest.raises(TableLoadError, match="must be strings"):
        TranslationTable.load(path)
