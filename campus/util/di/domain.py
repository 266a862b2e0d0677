"""Domain layer DI providers."""

from dishka import Scope, provide

from campus.config import AuthSettings
from campus.domain.repository import (
    CommentRepository,
    CommunityRepository,
    LikeRepository,
    PostRepository,
)
from campus.domain.service import (
    CommentService,
    JWTService,
    LikeService,
    MembershipService,
    PostService,
)
from campus.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_like_service(
        self,
        like_repository: LikeRepository,
        post_service: PostService,
        comment_service: CommentService,
    ) -> LikeService:
        """Provide like domain service."""
        return LikeService(
            like_repository=like_repository,
            post_service=post_service,
            comment_service=comment_service,
        )

    @provide
    def get_membership_service(
        self, community_repository: CommunityRepository
    ) -> MembershipService:
        """Provide membership domain service."""
        return MembershipService(community_repository=community_repository)
