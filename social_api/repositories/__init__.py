"""Repository layer to abstract MongoDB access patterns."""

from .base import RecordRepository
from .deletion_journal import DeletionJournalRepository
from .member_type import MemberTypeRepository
from .post import PostRepository
from .profile import ProfileRepository
from .user import UserRepository

__all__ = [
    "DeletionJournalRepository",
    "MemberTypeRepository",
    "PostRepository",
    "ProfileRepository",
    "RecordRepository",
    "UserRepository",
]
