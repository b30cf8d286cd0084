"""Tests for LocalTicketStorage."""

import pytest

from app.adapters.storage.local_ticket_storage import LocalTicketStorage
from app.domain.errors import InvalidTicketImageError, TicketStorageError


@pytest.mark.asyncio
async def test_store_writes_under_user_dir(tmp_path):
    storage = LocalTicketStorage(root=tmp_path)
    path = await storage.store("u-1", "ticket-photo.jpg", b"jpeg-bytes")

    user_dir, name = path.split("/")
    assert user_dir == "u-1"
    assert name.endswith("-ticket-photo.jpg")
    assert (tmp_path / path).read_bytes() == b"jpeg-bytes"


@pytest.mark.asyncio
async def test_store_rejects_empty_content(tmp_path):
    storage = LocalTicketStorage(root=tmp_path)
    with pytest.raises(InvalidTicketImageError):
        await storage.store("u-1", "t.png", b"")


@pytest.mark.asyncio
@pytest.mark.parametrize("name", ["notes.txt", "archive.zip", "noextension"])
async def test_store_rejects_non_images(tmp_path, name):
    storage = LocalTicketStorage(root=tmp_path)
    with pytest.raises(InvalidTicketImageError):
        await storage.store("u-1", name, b"data")


@pytest.mark.asyncio
async def test_store_cannot_escape_root(tmp_path):
    storage = LocalTicketStorage(root=tmp_path / "images")
    path = await storage.store("../../evil", "../../../x.png", b"data")
    assert ".." not in path
    assert (tmp_path / "images" / path).exists()


@pytest.mark.asyncio
async def test_write_failure_raises_storage_error(tmp_path):
    blocker = tmp_path / "root"
    blocker.write_text("not a directory")
    storage = LocalTicketStorage(root=blocker)
    with pytest.raises(TicketStorageError):
        await storage.store("u-1", "t.png", b"data")


def test_invalid_image_is_a_storage_error():
    assert issubclass(InvalidTicketImageError, TicketStorageError)


def test_sanitize_filename():
    assert LocalTicketStorage.sanitize_filename("my ticket (1).PNG") == "my_ticket_1_.PNG"
    assert LocalTicketStorage.sanitize_filename("") == "ticket"


@pytest.mark.asyncio
async def test_delete_removes_stored_image(tmp_path):
    storage = LocalTicketStorage(root=tmp_path)
    path = await storage.store("u-1", "t.png", b"data")

    await storage.delete(path)

    assert not (tmp_path / path).exists()


@pytest.mark.asyncio
async def test_delete_missing_image_is_a_no_op(tmp_path):
    storage = LocalTicketStorage(root=tmp_path)
    await storage.delete("u-1/123-gone.png")


@pytest.mark.asyncio
async def test_delete_refuses_paths_outside_root(tmp_path):
    outside = tmp_path / "keep.png"
    outside.write_bytes(b"data")
    storage = LocalTicketStorage(root=tmp_path / "images")

    with pytest.raises(TicketStorageError):
        await storage.delete("../keep.png")
    assert outside.exists()
