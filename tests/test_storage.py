"""Tests for the notes directory layout helpers."""

from __future__ import annotations

import pytest
from standup.storage import (
    AlreadyExistsError,
    NotInitializedError,
    ensure_initialized,
    initialize_directory,
    note_path,
)


def test_initialize_creates_directory(tmp_path) -> None:
    directory = tmp_path / "standups"

    message = initialize_directory(directory)

    assert directory.is_dir()
    assert message == f"{directory} was successfully created"


def test_initialize_twice_fails(tmp_path) -> None:
    directory = tmp_path / "standups"
    initialize_directory(directory)

    with pytest.raises(AlreadyExistsError) as excinfo:
        initialize_directory(directory)

    assert str(excinfo.value) == f"{directory} already exists"
    assert excinfo.value.path == directory


def test_initialize_existing_path_leaves_it_untouched(tmp_path) -> None:
    (tmp_path / "keep.md").write_text("keep", encoding="utf-8")

    with pytest.raises(AlreadyExistsError):
        initialize_directory(tmp_path)

    assert [p.name for p in tmp_path.iterdir()] == ["keep.md"]


def test_initialize_rejects_existing_file(tmp_path) -> None:
    existing = tmp_path / "standups"
    existing.write_text("", encoding="utf-8")

    with pytest.raises(AlreadyExistsError):
        initialize_directory(existing)

    assert existing.is_file()


def test_initialize_does_not_create_parents(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        initialize_directory(tmp_path / "missing" / "standups")


def test_ensure_initialized(tmp_path) -> None:
    ensure_initialized(tmp_path)

    with pytest.raises(NotInitializedError) as excinfo:
        ensure_initialized(tmp_path / "standups")

    assert "standup init" in str(excinfo.value)


def test_note_path(tmp_path) -> None:
    assert note_path(tmp_path, "2024-03-05") == tmp_path / "2024-03-05.md"
