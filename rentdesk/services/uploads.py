# rentdesk/services/uploads.py
from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Sequence

from ..errors import NotFound, ValidationFailure

log = logging.getLogger("rentdesk.uploads")

MB = 1024 * 1024


@dataclass(frozen=True)
class UploadTarget:
    name: str
    accept: tuple[str, ...]  # exact mime types
    max_file_size: int  # bytes
    max_file_count: int = 1

    def accepts(self, content_type: Optional[str]) -> bool:
        return _mime(content_type) in self.accept


# stored extension comes from the checked mime type, never the client filename
EXTENSIONS = {
    "image/jpeg": ".jpg",
    "image/png": ".png",
    "image/gif": ".gif",
    "image/webp": ".webp",
    "application/pdf": ".pdf",
}

IMAGE_TYPES = ("image/jpeg", "image/png", "image/gif", "image/webp")


def _mime(content_type: Optional[str]) -> str:
    ctype = (content_type or "").split(";", 1)[0].strip().lower()
    return "image/jpeg" if ctype == "image/jpg" else ctype


UPLOAD_TARGETS: dict[str, UploadTarget] = {
    "tenantImage": UploadTarget("tenantImage", accept=IMAGE_TYPES, max_file_size=2 * MB),
    "userImage": UploadTarget("userImage", accept=IMAGE_TYPES, max_file_size=2 * MB),
    "rentContract": UploadTarget("rentContract", accept=("application/pdf",), max_file_size=4 * MB),
}


@dataclass(frozen=True)
class IncomingFile:
    filename: str
    content_type: Optional[str]
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class StoredFile:
    url: str
    key: str
    name: str
    size: int


def get_target(name: str) -> UploadTarget:
    target = UPLOAD_TARGETS.get(name)
    if target is None:
        raise NotFound(f"Unknown upload target: {name}")
    return target


def check_file(target: UploadTarget, *, content_type: Optional[str], size: int) -> None:
    if not target.accepts(content_type):
        expected = ", ".join(target.accept)
        raise ValidationFailure(f"Invalid file type for {target.name}: expected {expected}")
    if size > target.max_file_size:
        limit_mb = target.max_file_size // MB
        raise ValidationFailure(f"File size exceeds {limit_mb}MB limit.")


def check_upload(target: UploadTarget, files: Sequence[IncomingFile]) -> None:
    if not files:
        raise ValidationFailure("No files provided")
    if len(files) > target.max_file_count:
        raise ValidationFailure(f"{target.name} accepts at most {target.max_file_count} file(s)")
    for f in files:
        check_file(target, content_type=f.content_type, size=f.size)


class LocalUploadStore:
    """
    Writes uploads under root_dir/<target>/<uuid><ext> and hands back the public
    url + key. Persisting the url onto a record is the caller's job.
    """

    def __init__(self, root_dir: str, base_url: str) -> None:
        self.root = Path(root_dir)
        self.base_url = base_url.rstrip("/")

    def save(self, target: UploadTarget, f: IncomingFile) -> StoredFile:
        key = f"{target.name}/{uuid.uuid4().hex}{EXTENSIONS[_mime(f.content_type)]}"
        path = self.root / key
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(f.data)
        return StoredFile(url=f"{self.base_url}/{key}", key=key, name=f.filename, size=f.size)

    def accept(self, target: UploadTarget, files: Sequence[IncomingFile]) -> list[StoredFile]:
        check_upload(target, files)
        out = [self.save(target, f) for f in files]
        log.info(
            "upload complete",
            extra={"upload_target": target.name, "entity_id": ",".join(s.key for s in out)},
        )
        return out


async def read_incoming(upload: Any, target: UploadTarget) -> IncomingFile:
    """
    Read one multipart file without pulling more than the target allows.

    At most max_file_size + 1 bytes are read, so an oversized file is still
    seen as oversized by check_file without being buffered whole.
    """
    declared = getattr(upload, "size", None)
    if declared is not None and declared > target.max_file_size:
        check_file(target, content_type=upload.content_type, size=declared)

    data = await upload.read(target.max_file_size + 1)
    return IncomingFile(filename=upload.filename or "upload", content_type=upload.content_type, data=data)
