from .exceptions import InvalidOperationError
from .member_type_service import MemberTypeService
from .post_service import PostService
from .profile_service import ProfileService
from .subscription_service import SubscriptionService
from .user_deletion_service import UserDeletionService
from .user_service import UserService

__all__ = [
    "InvalidOperationError",
    "MemberTypeService",
    "PostService",
    "ProfileService",
    "SubscriptionService",
    "UserDeletionService",
    "UserService",
]
