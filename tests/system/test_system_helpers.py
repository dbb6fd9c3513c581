import os

import pytest

from schemaslice.errors import GeneratorNotFoundError, SchemaLoadError
from schemaslice.system import filter_schema_file, load_schema, write_tempfile

from tests.schemas import CLIENT, DATASOURCE, ERD, SCHEMA, USER


def _make_schema_folder(base):
    folder = base / "schema"
    (folder / "models").mkdir(parents=True)
    (folder / "drafts").mkdir()
    (folder / ".gitignore").write_text("drafts/\nscratch.prisma\n")
    (folder / "main.prisma").write_text(DATASOURCE + "\n\n" + CLIENT + "\n\n" + ERD + "\n")
    (folder / "models" / "user.prisma").write_text(USER + "\n\n\n")
    (folder / "models" / "README.md").write_text("not a schema")
    (folder / "drafts" / "wip.prisma").write_text("model Wip {\n")
    (folder / "scratch.prisma").write_text("generator scratch {\n}\n")
    return folder


def test_load_schema_single_file(tmp_path):
    path = tmp_path / "schema.prisma"
    path.write_text(SCHEMA)
    assert load_schema(str(path)) == SCHEMA


def test_load_schema_folder_joins_sorted_files_and_respects_gitignore(tmp_path):
    folder = _make_schema_folder(tmp_path)
    text = load_schema(str(folder))
    assert text == DATASOURCE + "\n\n" + CLIENT + "\n\n" + ERD + "\n\n" + USER + "\n"
    assert "Wip" not in text
    assert "scratch" not in text
    assert "not a schema" not in text


def test_load_schema_missing_path(tmp_path):
    with pytest.raises(SchemaLoadError, match="does not exist"):
        load_schema(str(tmp_path / "nope.prisma"))


def test_load_schema_folder_without_schema_files(tmp_path):
    (tmp_path / "notes.txt").write_text("hello")
    with pytest.raises(SchemaLoadError, match="No .prisma files"):
        load_schema(str(tmp_path))


def test_filter_schema_file_on_folder(tmp_path):
    folder = _make_schema_folder(tmp_path)
    out = filter_schema_file(str(folder), "erd")
    assert out == DATASOURCE + "\n\n" + ERD + "\n\n" + USER
    assert "generator client" not in out


def test_filter_schema_file_unknown_generator(tmp_path):
    path = tmp_path / "schema.prisma"
    path.write_text(SCHEMA)
    with pytest.raises(GeneratorNotFoundError):
        filter_schema_file(str(path), "nexus")


def test_write_tempfile_persists_text(tmp_path):
    path = write_tempfile("generator client {\n}\n", dir=str(tmp_path))
    assert os.path.isabs(path)
    assert path.endswith(".prisma")
    assert os.path.basename(path).startswith("schemaslice-")
    with open(path, encoding="utf-8") as f:
        assert f.read() == "generator client {\n}\n"


def test_write_tempfile_adds_dot_to_suffix(tmp_path):
    path = write_tempfile("x", suffix="txt", prefix="cf-", dir=str(tmp_path))
    assert path.endswith(".txt")
    assert os.path.basename(path).startswith("cf-")


def test_load_schema_folder_respects_parent_gitignore(tmp_path):
    (tmp_path / ".gitignore").write_text("prisma/drafts/\n")
    folder = tmp_path / "prisma"
    (folder / "drafts").mkdir(parents=True)
    (folder / "main.prisma").write_text(DATASOURCE + "\n\n" + CLIENT + "\n")
    (folder / "drafts" / "wip.prisma").write_text("model Wip {\n")

    text = load_schema(str(folder))

    assert text == DATASOURCE + "\n\n" + CLIENT + "\n"
    assert "Wip" not in text
    assert filter_schema_file(str(folder), "client") == DATASOURCE + "\n\n" + CLIENT


def test_load_schema_rejects_undecodable_file(tmp_path):
    path = tmp_path / "schema.prisma"
    path.write_bytes(b"generator client {\n  provider = \xff\n}\n")
    with pytest.raises(SchemaLoadError, match="Failed to read schema file") as exc:
        load_schema(str(path))
    assert isinstance(exc.value.__cause__, UnicodeDecodeError)
