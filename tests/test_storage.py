"""스토리지 테스트 — 로컬 모드 presigned URL, 업로드, 확정(finalize).

Storage tests — Local-mode upload URLs, temp uploads, and moving a temp
upload to its final key when the product is saved.
"""

import pytest
from httpx import AsyncClient

from app.services import storage_service as storage_module
from app.services.storage_service import storage_service
from app.utils.exceptions import BadRequestError
from tests.conftest import session_header

STORAGE = "/api/v1/admin/storage"


@pytest.fixture
def uploads_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(storage_module, "UPLOADS_DIR", tmp_path)
    return tmp_path


class TestLocalStorage:
    """로컬 스토리지."""

    def test_presigned_url_targets_temp(self, uploads_dir):
        result = storage_service.generate_presigned_upload_url("shoe.PNG", "image/png")
        assert result["key"].startswith("temp/products/")
        assert result["key"].endswith(".png")
        assert result["upload_url"].endswith(f"/api/v1/admin/storage/upload/{result['key']}")
        assert result["file_url"] == storage_service.public_prefix + result["key"]

    def test_unsafe_extension_becomes_bin(self):
        assert storage_service.generate_key("evil.p/hp", "products").endswith(".bin")

    def test_rejects_non_image(self):
        with pytest.raises(BadRequestError):
            storage_service.generate_presigned_upload_url("notes.pdf", "application/pdf")

    def test_save_requires_temp_prefix(self, uploads_dir):
        with pytest.raises(BadRequestError):
            storage_service.save_local("products/a.png", b"x")

    def test_save_rejects_traversal(self, uploads_dir):
        """경로 이탈 차단."""
        with pytest.raises(BadRequestError):
            storage_service.save_local("temp/../../etc/passwd", b"x")

    def test_finalize_moves_file(self, uploads_dir):
        """temp 파일을 최종 경로로 이동."""
        result = storage_service.generate_presigned_upload_url("shoe.jpg", "image/jpeg")
        storage_service.save_local(result["key"], b"jpeg-bytes")

        final_url = storage_service.finalize_upload(result["file_url"])
        final_key = result["key"][len("temp/"):]
        assert final_url == storage_service.public_prefix + final_key
        assert (uploads_dir / final_key).read_bytes() == b"jpeg-bytes"
        assert not (uploads_dir / result["key"]).exists()

    def test_finalize_leaves_external_urls(self):
        url = "https://images.unsplash.com/photo-1542291026-7eec264c27ff"
        assert storage_service.finalize_upload(url) == url

    def test_finalize_missing_upload(self, uploads_dir):
        with pytest.raises(BadRequestError) as exc_info:
            storage_service.finalize_upload(storage_service.public_prefix + "temp/products/missing.png")
        assert exc_info.value.detail == "Uploaded image not found"


class TestStorageApi:
    """스토리지 API + 업로드 이미지 상품 생성/수정."""

    async def upload(self, client: AsyncClient, admin_token: str, filename: str, data: bytes) -> str:
        """presigned URL 발급 후 temp 영역에 업로드하고 temp file_url을 반환합니다."""
        content_type = "image/webp" if filename.endswith(".webp") else "image/png"
        res = await client.post(
            f"{STORAGE}/presigned-url",
            json={"filename": filename, "content_type": content_type},
            headers=session_header(admin_token),
        )
        assert res.status_code == 200
        file_url = res.json()["file_url"]
        key = storage_service.extract_key(file_url)

        res = await client.put(f"{STORAGE}/upload/{key}", content=data, headers=session_header(admin_token))
        assert res.status_code == 200
        assert res.json() == {"ok": True, "file_url": file_url}
        return file_url

    async def test_upload_then_create_product(self, client: AsyncClient, admin_token, uploads_dir):
        file_url = await self.upload(client, admin_token, "boot.webp", b"webp")
        temp_key = storage_service.extract_key(file_url)
        assert (uploads_dir / temp_key).read_bytes() == b"webp"

        res = await client.post(
            "/api/v1/admin/products",
            json={
                "title": "Chelsea Boot",
                "price": 380,
                "category": "men",
                "sizes": [42],
                "image_type": "upload",
                "image_url": file_url,
            },
            headers=session_header(admin_token),
        )
        assert res.status_code == 201
        data = res.json()["data"]
        assert data["image_type"] == "upload"
        image_url = data["image_url"]
        assert "/temp/" not in image_url
        assert storage_service.extract_key(image_url) == temp_key[len("temp/"):]
        assert (uploads_dir / storage_service.extract_key(image_url)).read_bytes() == b"webp"
        assert not (uploads_dir / temp_key).exists()

    async def test_upload_then_update_product(self, client: AsyncClient, admin_token, product, uploads_dir):
        """수정 시 업로드 이미지도 최종 위치로 이동."""
        file_url = await self.upload(client, admin_token, "loafer.png", b"png")
        temp_key = storage_service.extract_key(file_url)

        res = await client.put(
            f"/api/v1/admin/products/{product.id}",
            json={"image_type": "upload", "image_url": file_url},
            headers=session_header(admin_token),
        )
        assert res.status_code == 200
        data = res.json()["data"]
        assert data["image_type"] == "upload"
        assert data["title"] == product.title
        final_key = storage_service.extract_key(data["image_url"])
        assert not final_key.startswith("temp/")
        assert (uploads_dir / final_key).read_bytes() == b"png"
        assert not (uploads_dir / temp_key).exists()

    async def test_upload_missing_file_rejected(self, client: AsyncClient, admin_token, uploads_dir):
        """temp 파일 없이 저장하면 400."""
        res = await client.post(
            "/api/v1/admin/products",
            json={
                "title": "Ghost Sneaker",
                "price": 120,
                "category": "women",
                "sizes": [38],
                "image_type": "upload",
                "image_url": storage_service.public_prefix + "temp/products/missing.png",
            },
            headers=session_header(admin_token),
        )
        assert res.status_code == 400
        assert res.json()["error"] == "Uploaded image not found"

    async def test_upload_requires_session(self, client: AsyncClient, uploads_dir):
        res = await client.put(f"{STORAGE}/upload/temp/products/x.png", content=b"x")
        assert res.status_code == 401
