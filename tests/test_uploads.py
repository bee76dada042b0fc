# tests/test_uploads.py
from __future__ import annotations

import asyncio

import pytest

from rentdesk.errors import NotFound, ValidationFailure
from rentdesk.services.uploads import MB, IncomingFile, LocalUploadStore, check_upload, get_target, read_incoming


def _png(size: int, name: str = "face.png") -> IncomingFile:
    return IncomingFile(filename=name, content_type="image/png", data=b"\0" * size)


def test_tenant_image_over_2mb_is_rejected():
    with pytest.raises(ValidationFailure) as ei:
        check_upload(get_target("tenantImage"), [_png(3 * MB)])
    assert ei.value.message == "File size exceeds 2MB limit."


def test_tenant_image_of_1mb_is_accepted():
    check_upload(get_target("tenantImage"), [_png(1 * MB)])


def test_only_one_file_per_target():
    with pytest.raises(ValidationFailure):
        check_upload(get_target("userImage"), [_png(10), _png(10, "b.png")])


def test_rent_contract_must_be_pdf():
    target = get_target("rentContract")
    with pytest.raises(ValidationFailure):
        check_upload(target, [_png(10)])

    pdf = IncomingFile(filename="lease.pdf", content_type="application/pdf", data=b"%PDF" + b"\0" * (3 * MB))
    check_upload(target, [pdf])


def test_unknown_target():
    with pytest.raises(NotFound):
        get_target("avatar")


def test_store_writes_under_target_dir(tmp_path):
    store = LocalUploadStore(str(tmp_path), "/uploads/")
    [stored] = store.accept(get_target("userImage"), [_png(16)])

    assert stored.key.startswith("userImage/") and stored.key.endswith(".png")
    assert stored.url == f"/uploads/{stored.key}"
    assert stored.size == 16
    assert (tmp_path / stored.key).read_bytes() == b"\0" * 16


def test_upload_endpoint_returns_url_and_serves_file(authed):
    r = authed.post(
        "/api/uploads/tenantImage",
        files=[("files", ("face.png", b"\x89PNG" + b"\0" * 64, "image/png"))],
    )
    assert r.status_code == 200
    [out] = r.json()
    assert out["name"] == "face.png"
    assert out["size"] == 68

    served = authed.get(out["url"])
    assert served.status_code == 200
    assert served.content.startswith(b"\x89PNG")


def test_upload_endpoint_rejects_oversize(authed):
    r = authed.post(
        "/api/uploads/tenantImage",
        files=[("files", ("big.png", b"\0" * (3 * MB), "image/png"))],
    )
    assert r.status_code == 400
    assert r.json()["error"] == "File size exceeds 2MB limit."


def test_upload_endpoint_needs_session(client):
    r = client.post("/api/uploads/userImage", files=[("files", ("a.png", b"x", "image/png"))])
    assert r.status_code == 401


def test_upload_targets_listing(authed):
    r = authed.get("/api/uploads/targets")
    assert r.status_code == 200
    body = r.json()
    assert body["rentContract"] == {"accept": ["application/pdf"], "maxFileSize": 4 * MB, "maxFileCount": 1}
    assert set(body) == {"tenantImage", "userImage", "rentContract"}


def test_svg_is_not_an_accepted_image():
    svg = IncomingFile(filename="x.svg", content_type="image/svg+xml", data=b"<svg/>")
    with pytest.raises(ValidationFailure):
        check_upload(get_target("tenantImage"), [svg])


def test_stored_extension_follows_content_type(tmp_path):
    store = LocalUploadStore(str(tmp_path), "/uploads")
    f = IncomingFile(filename="x.html", content_type="image/png", data=b"<script>alert(1)</script>")
    [stored] = store.accept(get_target("tenantImage"), [f])

    assert stored.key.endswith(".png")
    assert stored.name == "x.html"


def test_html_named_image_is_not_served_as_html(authed):
    r = authed.post(
        "/api/uploads/tenantImage",
        files=[("files", ("x.html", b"<script>alert(1)</script>", "image/png"))],
    )
    assert r.status_code == 200
    [out] = r.json()
    assert out["key"].endswith(".png")

    served = authed.get(out["url"])
    assert served.status_code == 200
    assert served.headers["content-type"].startswith("image/png")


class _Upload:
    def __init__(self, data: bytes, content_type: str = "image/png", size=None):
        self.filename = "big.png"
        self.content_type = content_type
        self.size = size
        self._data = data
        self.requested = []

    async def read(self, n: int = -1) -> bytes:
        self.requested.append(n)
        return self._data if n < 0 else self._data[:n]


def test_read_incoming_stops_past_the_limit():
    target = get_target("tenantImage")
    upload = _Upload(b"\0" * (5 * MB))

    f = asyncio.run(read_incoming(upload, target))

    assert upload.requested == [2 * MB + 1]
    assert f.size == 2 * MB + 1
    with pytest.raises(ValidationFailure):
        check_upload(target, [f])


def test_read_incoming_rejects_declared_size_without_reading():
    upload = _Upload(b"", size=3 * MB)
    with pytest.raises(ValidationFailure) as ei:
        asyncio.run(read_incoming(upload, get_target("tenantImage")))
    assert ei.value.message == "File size exceeds 2MB limit."
    assert upload.requested == []
