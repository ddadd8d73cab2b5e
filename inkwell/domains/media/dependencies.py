"""
File: inkwell/domains/media/dependencies.py
Description: 媒体上传领域依赖注入 (DI)

依赖链：
ObjectStorage → MediaService → MediaServiceDep

Created: 2026-03-02
"""

from typing import Annotated

from fastapi import Depends

from inkwell.core.storage import ObjectStorage, get_object_storage
from inkwell.domains.media.service import MediaService


async def get_media_service(
    storage: Annotated[ObjectStorage, Depends(get_object_storage)],
) -> MediaService:
    return MediaService(storage=storage)


MediaServiceDep = Annotated[MediaService, Depends(get_media_service)]
