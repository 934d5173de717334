"""Tests for apidocgen.loader."""

from __future__ import annotations

from pathlib import Path

import pytest

from apidocgen.loader import DocumentLoadError, load_documentation, load_documentation_files


def test_load_documentation_parses_members(documentation_file: Path) -> None:
    tree = load_documentation(documentation_file)

    members = tree.getroot().findall("./members/member")
    assert [member.get("name") for member in members] == [
        "M:Widgets.Api.WidgetController.List"
    ]


def test_load_documentation_files_preserves_order(tmp_path: Path) -> None:
    first = tmp_path / "first.xml"
    second = tmp_path / "second.xml"
    first.write_text("<doc><assembly><name>First</name></assembly></doc>", encoding="utf-8")
    second.write_text("<doc><assembly><name>Second</name></assembly></doc>", encoding="utf-8")

    trees = load_documentation_files([second, first])

    assert [tree.findtext("./assembly/name") for tree in trees] == ["Second", "First"]


def test_load_documentation_rejects_malformed_xml(tmp_path: Path) -> None:
    broken = tmp_path / "broken.xml"
    broken.write_text("<doc>", encoding="utf-8")

    with pytest.raises(DocumentLoadError) as excinfo:
        load_documentation(broken)

    assert excinfo.value.path == broken
    assert str(broken) in str(excinfo.value)


def test_load_documentation_rejects_missing_file(tmp_path: Path) -> None:
    with pytest.raises(DocumentLoadError):
        load_documentation(tmp_path / "missing.xml")
