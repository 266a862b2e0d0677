"""Application layer DI providers."""

from dishka import Scope, provide

from campus.application.usecase.comment import (
    CreateCommentUseCase,
    GetCommentThreadUseCase,
)
from campus.application.usecase.community import ToggleMembershipUseCase
from campus.application.usecase.like import GetLikeStatusUseCase, ToggleLikeUseCase
from campus.config import CommentSettings
from campus.domain.service import (
    CommentService,
    JWTService,
    LikeService,
    MembershipService,
    PostService,
)
from campus.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider."""

    scope = Scope.REQUEST

    # Comment use cases
    @provide
    def get_comment_thread_use_case(
        self,
        comment_service: CommentService,
        like_service: LikeService,
        jwt_service: JWTService,
        comment_settings: CommentSettings,
    ) -> GetCommentThreadUseCase:
        """Provide get comment thread use case."""
        return GetCommentThreadUseCase(
            comment_service=comment_service,
            like_service=like_service,
            jwt_service=jwt_service,
            comment_settings=comment_settings,
        )

    @provide
    def get_create_comment_use_case(
        self, comment_service: CommentService, post_service: PostService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service, post_service=post_service
        )

    # Like use cases
    @provide
    def get_toggle_like_use_case(self, like_service: LikeService) -> ToggleLikeUseCase:
        """Provide toggle like use case."""
        return ToggleLikeUseCase(like_service=like_service)

    @provide
    def get_like_status_use_case(
        self, like_service: LikeService, jwt_service: JWTService
    ) -> GetLikeStatusUseCase:
        """Provide get like status use case."""
        return GetLikeStatusUseCase(like_service=like_service, jwt_service=jwt_service)

    # Community use cases
    @provide
    def get_toggle_membership_use_case(
        self, membership_service: MembershipService
    ) -> ToggleMembershipUseCase:
        """Provide toggle membership use case."""
        return ToggleMembershipUseCase(membership_service=membership_service)
