"""관리자 스토리지 라우터 — 상품 이미지 업로드.

Admin Storage Router — Product image uploads for the admin product form.
The form asks for an upload URL, PUTs the image there, then saves the
product with ``image_type="upload"`` and the returned ``file_url``; the
product service moves the temp file to its final key.
"""

from fastapi import APIRouter, Request
from pydantic import BaseModel

from app.api.deps import CurrentAdmin
from app.services.storage_service import storage_service
from app.utils.exceptions import BadRequestError

router: APIRouter = APIRouter()


class UploadUrlRequest(BaseModel):
    """업로드 URL 요청 — Image file name and MIME type."""

    filename: str
    content_type: str


class UploadUrlResponse(BaseModel):
    """업로드 대상 — PUT target plus the temp URL to store on the product."""

    upload_url: str
    file_url: str
    key: str


@router.post("/presigned-url", response_model=UploadUrlResponse)
async def create_upload_url(
    data: UploadUrlRequest,
    current_admin: CurrentAdmin,
) -> dict:
    """상품 이미지 업로드 URL 생성 (S3 presigned PUT 또는 로컬 업로드 경로).

    Raises:
        BadRequestError: 이미지가 아닌 파일 (Non-image content type)
    """
    return storage_service.generate_presigned_upload_url(
        filename=data.filename,
        content_type=data.content_type,
        folder="products",
    )


@router.put("/upload/{key:path}")
async def upload_image(key: str, request: Request) -> dict:
    """로컬 모드 업로드 — S3가 설정되면 사용하지 않습니다.

    The session gate has already checked the cookie on this path.
    """
    if not storage_service.is_local:
        raise BadRequestError("Local uploads are disabled")
    storage_service.save_local(key, await request.body())
    return {"ok": True, "file_url": storage_service.public_prefix + key}
