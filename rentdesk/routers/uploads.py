# rentdesk/routers/uploads.py
from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, File, Request, UploadFile

from ..auth import require_session
from ..errors import ValidationFailure
from ..schemas import UploadedFileOut
from ..services.uploads import UPLOAD_TARGETS, LocalUploadStore, get_target, read_incoming

router = APIRouter(prefix="/uploads", tags=["uploads"], dependencies=[Depends(require_session)])


def get_upload_store(request: Request) -> LocalUploadStore:
    return request.app.state.upload_store


@router.get("/targets", response_model=dict)
def list_targets():
    return {
        name: {"accept": list(t.accept), "maxFileSize": t.max_file_size, "maxFileCount": t.max_file_count}
        for name, t in UPLOAD_TARGETS.items()
    }


@router.post("/{target_name}", response_model=list[UploadedFileOut])
async def upload(
    target_name: str,
    files: List[UploadFile] = File(...),
    store: LocalUploadStore = Depends(get_upload_store),
):
    target = get_target(target_name)

    if len(files) > target.max_file_count:
        raise ValidationFailure(f"{target_name} accepts at most {target.max_file_count} file(s)")

    incoming = [await read_incoming(f, target) for f in files]

    stored = store.accept(target, incoming)
    return [UploadedFileOut(url=s.url, key=s.key, name=s.name, size=s.size) for s in stored]
