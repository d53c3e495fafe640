"""Application services shared by every user interface."""

from .batch_service import BatchTagService
from .folder_session import FolderSession

__all__ = ["BatchTagService", "FolderSession"]
