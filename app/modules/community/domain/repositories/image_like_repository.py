# 📄 File: app/modules/community/domain/repositories/image_like_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how likes on garden photos are recorded, checked, counted and removed.
# 🧪 Purpose (Technical Summary):
# Repository interface for ImageLike entities keyed by (image_id, user_id).
# 🔗 Dependencies:
# abc, app.shared.infrastructure.database.search
# 🔄 Connected Modules / Calls From:
# ImageLikeService, ImageLikeRepositoryImpl

from abc import ABC, abstractmethod
from uuid import UUID

from app.shared.infrastructure.database.search import Page, PageRequest


class ImageLikeRepository(ABC):
    """
    Repository interface for image likes.

    A user likes an image at most once; ``create`` raises
    ``DuplicateResourceError`` when the pair already exists.
    """

    @abstractmethod
    async def find_all(self, page_request: PageRequest) -> Page:
        pass

    @abstractmethod
    async def get_by_id(self, like_id: UUID):
        pass

    @abstractmethod
    async def find_by_image_id(self, image_id: UUID, page_request: PageRequest) -> Page:
        pass

    @abstractmethod
    async def get_by_image_and_user(self, image_id: UUID, user_id: UUID):
        pass

    @abstractmethod
    async def exists(self, image_id: UUID, user_id: UUID) -> bool:
        pass

    @abstractmethod
    async def count_by_image_id(self, image_id: UUID) -> int:
        pass

    @abstractmethod
    async def create(self, like):
        """
        Persist a new like.

        Raises:
            DuplicateResourceError: If the user already likes the image
        """
        pass

    @abstractmethod
    async def delete(self, like_id: UUID) -> bool:
        pass

    @abstractmethod
    async def delete_by_image_and_user(self, image_id: UUID, user_id: UUID) -> bool:
        """
        Remove a user's like on an image.

        Returns:
            True if a like was removed, False if there was none
        """
        pass
