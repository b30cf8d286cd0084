"""Local filesystem ticket storage — implements TicketStoragePort."""

from __future__ import annotations

import asyncio
import logging
import re
import time
from pathlib import Path

from app.application.ports.ticket_storage_port import TicketStoragePort
from app.config import settings
from app.domain.errors import InvalidTicketImageError, TicketStorageError

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = {".png", ".jpg", ".jpeg", ".gif", ".webp"}

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


class LocalTicketStorage(TicketStoragePort):
    """Writes ticket images to `{root}/{user_id}/{epoch_ms}-{filename}`."""

    def __init__(self, root: str | Path | None = None):
        self._root = Path(root or settings.ticket_image_dir)

    async def store(self, user_id: str, filename: str, content: bytes) -> str:
        if not content:
            raise InvalidTicketImageError("Ticket image is empty")

        safe_name = self.sanitize_filename(filename)
        if Path(safe_name).suffix.lower() not in IMAGE_EXTENSIONS:
            raise InvalidTicketImageError(
                f"Unsupported ticket image type: {filename!r} "
                f"(allowed: {', '.join(sorted(IMAGE_EXTENSIONS))})"
            )

        user_dir = self.sanitize_filename(user_id)
        relative = Path(user_dir) / f"{int(time.time() * 1000)}-{safe_name}"
        target = self._root / relative

        try:
            await asyncio.to_thread(self._write, target, content)
        except OSError as e:
            logger.exception("Failed to store ticket image %s", target)
            raise TicketStorageError(f"Could not store ticket image: {e}") from e

        logger.info("Stored ticket image for user %s at %s", user_id, relative)
        return relative.as_posix()

    async def delete(self, path: str) -> None:
        target = self._root / path
        if self._root.resolve() not in target.resolve().parents:
            raise TicketStorageError(f"Refusing to delete outside storage root: {path!r}")
        try:
            await asyncio.to_thread(target.unlink, missing_ok=True)
        except OSError as e:
            raise TicketStorageError(f"Could not delete ticket image: {e}") from e
        logger.info("Deleted ticket image %s", path)

    @staticmethod
    def _write(target: Path, content: bytes) -> None:
        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, "wb") as f:
            f.write(content)

    @staticmethod
    def sanitize_filename(name: str) -> str:
        """Strip directories and anything outside [A-Za-z0-9._-]."""
        base = Path(name or "").name
        cleaned = _UNSAFE_CHARS.sub("_", base).strip("._")
        return cleaned or "ticket"
