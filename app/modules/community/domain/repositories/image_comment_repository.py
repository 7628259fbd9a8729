# 📄 File: app/modules/community/domain/repositories/image_comment_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how comments on garden photos are saved, listed and counted.
# 🧪 Purpose (Technical Summary):
# Repository interface for ImageComment entities.
# 🔗 Dependencies:
# abc, app.shared.infrastructure.database.search
# 🔄 Connected Modules / Calls From:
# ImageCommentService, ImageCommentRepositoryImpl

from abc import ABC, abstractmethod
from uuid import UUID

from app.shared.infrastructure.database.search import Page, PageRequest


class ImageCommentRepository(ABC):

    @abstractmethod
    async def find_all(self, page_request: PageRequest) -> Page:
        pass

    @abstractmethod
    async def get_by_id(self, comment_id: UUID):
        pass

    @abstractmethod
    async def create(self, comment):
        pass

    @abstractmethod
    async def update(self, comment):
        pass

    @abstractmethod
    async def delete(self, comment_id: UUID) -> bool:
        pass

    @abstractmethod
    async def find_by_image_id(self, image_id: UUID, page_request: PageRequest) -> Page:
        pass

    @abstractmethod
    async def find_by_user_id(self, user_id: UUID, page_request: PageRequest) -> Page:
        pass

    @abstractmethod
    async def count_by_image_id(self, image_id: UUID) -> int:
        pass
