"""Domain layer DI providers."""

import logfire
from dishka import Scope, provide

from qeta.config import AuthSettings, Settings
from qeta.domain.repository import (
    AnswerRepository,
    CommentRepository,
    FavoriteRepository,
    QuestionRepository,
    TagRepository,
    VoteRepository,
)
from qeta.domain.service import (
    AllowAllPermissionGate,
    AnswerService,
    CommentService,
    FavoriteService,
    IdentityService,
    PermissionGate,
    PolicyPermissionGate,
    QuestionService,
    TagService,
    ViewTranslator,
    VoteService,
)
from qeta.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    The permission gate, identity service and view translator hold no
    request state and live for the whole application.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_permission_gate(self, settings: Settings) -> PermissionGate:
        """Provide the permission gate selected by configuration.

        Returns:
            A rule evaluating gate when permissions are enabled, an
            always-allow gate otherwise
        """
        permissions = settings.permissions
        if not permissions.enabled:
            logfire.info("Permission checks disabled")
            return AllowAllPermissionGate(moderators=permissions.moderators)

        logfire.info("Permission checks enabled", rules=list(permissions.rules))
        return PolicyPermissionGate(
            rules=permissions.rules, moderators=permissions.moderators
        )

    @provide(scope=Scope.APP)
    def get_identity_service(self, auth_settings: AuthSettings) -> IdentityService:
        """Provide identity resolution domain service."""
        return IdentityService(auth_settings=auth_settings)

    @provide(scope=Scope.APP)
    def get_view_translator(self) -> ViewTranslator:
        """Provide named view translator."""
        return ViewTranslator()

    @provide
    def get_question_service(
        self, question_repository: QuestionRepository, tag_repository: TagRepository
    ) -> QuestionService:
        """Provide question domain service."""
        return QuestionService(
            question_repository=question_repository, tag_repository=tag_repository
        )

    @provide
    def get_answer_service(self, answer_repository: AnswerRepository) -> AnswerService:
        """Provide answer domain service."""
        return AnswerService(answer_repository=answer_repository)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        question_service: QuestionService,
        answer_service: AnswerService,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            question_service=question_service,
            answer_service=answer_service,
        )

    @provide
    def get_favorite_service(
        self,
        favorite_repository: FavoriteRepository,
        question_service: QuestionService,
    ) -> FavoriteService:
        """Provide favorite domain service."""
        return FavoriteService(
            favorite_repository=favorite_repository,
            question_service=question_service,
        )

    @provide
    def get_tag_service(self, tag_repository: TagRepository) -> TagService:
        """Provide tag domain service."""
        return TagService(tag_repository=tag_repository)
