"""스토리지 서비스 — 상품 이미지를 S3 또는 로컬에 저장.

Storage Service — S3 presigned URL or local file storage for product images.
AWS 키가 비어있으면 자동으로 로컬 모드로 전환됩니다.
모든 업로드는 temp/ 폴더에 먼저 저장되고, 상품 저장 시 finalize_upload()로 최종 위치로 이동합니다.
"""

import logging
import re
import shutil
import uuid
from datetime import datetime, timezone
from pathlib import Path

from app.config import settings
from app.utils.exceptions import BadRequestError

logger = logging.getLogger(__name__)

# 로컬 업로드 디렉토리 — .env의 LOCAL_UPLOADS_DIR 또는 <project>/uploads/
_PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent.parent
UPLOADS_DIR: Path = Path(settings.LOCAL_UPLOADS_DIR) if settings.LOCAL_UPLOADS_DIR else _PROJECT_ROOT / "uploads"

# 허용 이미지 타입 — Content types accepted for product images
ALLOWED_CONTENT_TYPES: frozenset[str] = frozenset(
    {"image/jpeg", "image/png", "image/webp", "image/gif", "image/avif"}
)

_SAFE_EXT = re.compile(r"^[a-zA-Z0-9]{1,8}$")


class StorageService:
    """파일 업로드 서비스 — S3 또는 로컬 모드 자동 선택."""

    def __init__(self) -> None:
        self._client = None

    @property
    def is_local(self) -> bool:
        return not settings.AWS_ACCESS_KEY_ID or not settings.AWS_S3_BUCKET

    @property
    def client(self):
        if self.is_local:
            return None
        if self._client is None:
            import boto3
            from botocore.config import Config as BotoConfig

            self._client = boto3.client(
                "s3",
                region_name=settings.AWS_S3_REGION,
                aws_access_key_id=settings.AWS_ACCESS_KEY_ID,
                aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY,
                config=BotoConfig(signature_version="s3v4"),
            )
        return self._client

    @property
    def public_prefix(self) -> str:
        """파일 공개 URL 접두사 — Public URL prefix for stored keys."""
        if self.is_local:
            return f"{settings.PUBLIC_BASE_URL}/uploads/"
        return f"https://{settings.AWS_S3_BUCKET}.s3.{settings.AWS_S3_REGION}.amazonaws.com/"

    def generate_key(self, filename: str, folder: str) -> str:
        ext = filename.rsplit(".", 1)[-1] if "." in filename else "bin"
        if not _SAFE_EXT.match(ext):
            ext = "bin"
        date_prefix = datetime.now(timezone.utc).strftime("%Y/%m/%d")
        return f"temp/{folder}/{date_prefix}/{uuid.uuid4().hex}.{ext.lower()}"

    def generate_presigned_upload_url(
        self,
        filename: str,
        content_type: str,
        folder: str = "products",
        expires: int = 3600,
    ) -> dict[str, str]:
        """presigned PUT URL과 temp file URL을 반환합니다.

        Return an upload URL, the temporary public file URL, and the key.
        모든 업로드는 temp/ 하위에 저장되며 finalize_upload()로 최종 위치로 이동해야 합니다.

        Raises:
            BadRequestError: 이미지가 아닌 content type (Not an image content type)
        """
        if content_type not in ALLOWED_CONTENT_TYPES:
            raise BadRequestError("Only image uploads are allowed")

        key = self.generate_key(filename, folder)

        if self.is_local:
            upload_url = f"{settings.PUBLIC_BASE_URL}/api/v1/admin/storage/upload/{key}"
            return {"upload_url": upload_url, "file_url": self.public_prefix + key, "key": key}

        upload_url = self.client.generate_presigned_url(
            "put_object",
            Params={
                "Bucket": settings.AWS_S3_BUCKET,
                "Key": key,
                "ContentType": content_type,
            },
            ExpiresIn=expires,
        )
        return {"upload_url": upload_url, "file_url": self.public_prefix + key, "key": key}

    def _local_path(self, key: str) -> Path:
        path = (UPLOADS_DIR / key).resolve()
        if UPLOADS_DIR.resolve() not in path.parents:
            raise BadRequestError("Invalid storage key")
        return path

    def save_local(self, key: str, data: bytes) -> str:
        """로컬 파일 저장. 경로를 반환합니다."""
        if not key.startswith("temp/"):
            raise BadRequestError("Uploads must target the temp/ area")
        path = self._local_path(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        return str(path)

    def extract_key(self, file_url: str) -> str | None:
        """file URL에서 storage key를 추출합니다."""
        prefix = self.public_prefix
        if file_url.startswith(prefix):
            return file_url[len(prefix):]
        return None

    def finalize_upload(self, file_url: str) -> str:
        """temp 파일을 최종 위치로 이동합니다. 최종 file_url을 반환합니다.

        temp/ 경로가 아닌 파일(외부 URL, 이미 확정된 파일)은 그대로 반환합니다.
        """
        key = self.extract_key(file_url)
        if not key or not key.startswith("temp/"):
            return file_url

        final_key = key[len("temp/"):]

        if self.is_local:
            src = self._local_path(key)
            if not src.exists():
                raise BadRequestError("Uploaded image not found")
            dst = self._local_path(final_key)
            dst.parent.mkdir(parents=True, exist_ok=True)
            shutil.move(str(src), str(dst))
        else:
            self.client.copy_object(
                Bucket=settings.AWS_S3_BUCKET,
                Key=final_key,
                CopySource={"Bucket": settings.AWS_S3_BUCKET, "Key": key},
            )
            self.client.delete_object(Bucket=settings.AWS_S3_BUCKET, Key=key)

        logger.info(f"Finalized upload {key} -> {final_key}")
        return self.public_prefix + final_key


# 싱글턴 인스턴스 — Singleton instance
storage_service: StorageService = StorageService()
