"""Application layer DI providers."""

from dishka import Scope, provide

from qeta.application.usecase.answer import (
    CreateAnswerUseCase,
    DeleteAnswerUseCase,
    GetAnswerUseCase,
    MarkAnswerUseCase,
    UpdateAnswerUseCase,
)
from qeta.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
)
from qeta.application.usecase.favorite import FavoriteUseCase
from qeta.application.usecase.question import (
    CreateQuestionUseCase,
    DeleteQuestionUseCase,
    GetQuestionUseCase,
    ListQuestionsUseCase,
    UpdateQuestionUseCase,
)
from qeta.application.usecase.tag import ListTagsUseCase
from qeta.application.usecase.vote import VoteUseCase
from qeta.domain.service import (
    AnswerService,
    CommentService,
    FavoriteService,
    PermissionGate,
    QuestionService,
    TagService,
    ViewTranslator,
    VoteService,
)
from qeta.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Question use cases
    @provide(scope=Scope.REQUEST)
    def get_create_question_use_case(
        self, question_service: QuestionService, permission_gate: PermissionGate
    ) -> CreateQuestionUseCase:
        """Provide create question use case."""
        return CreateQuestionUseCase(
            question_service=question_service, permission_gate=permission_gate
        )

    @provide(scope=Scope.REQUEST)
    def get_get_question_use_case(
        self, question_service: QuestionService, permission_gate: PermissionGate
    ) -> GetQuestionUseCase:
        """Provide get question use case."""
        return GetQuestionUseCase(
            question_service=question_service, permission_gate=permission_gate
        )

    @provide(scope=Scope.REQUEST)
    def get_list_questions_use_case(
        self,
        question_service: QuestionService,
        view_translator: ViewTranslator,
        permission_gate: PermissionGate,
    ) -> ListQuestionsUseCase:
        """Provide list questions use case."""
        return ListQuestionsUseCase(
            question_service=question_service,
            view_translator=view_translator,
            permission_gate=permission_gate,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_question_use_case(
        self, question_service: QuestionService
    ) -> UpdateQuestionUseCase:
        """Provide update question use case."""
        return UpdateQuestionUseCase(question_service=question_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_question_use_case(
        self, question_service: QuestionService, permission_gate: PermissionGate
    ) -> DeleteQuestionUseCase:
        """Provide delete question use case."""
        return DeleteQuestionUseCase(
            question_service=question_service, permission_gate=permission_gate
        )

    # Answer use cases
    @provide(scope=Scope.REQUEST)
    def get_create_answer_use_case(
        self, answer_service: AnswerService, permission_gate: PermissionGate
    ) -> CreateAnswerUseCase:
        """Provide create answer use case."""
        return CreateAnswerUseCase(
            answer_service=answer_service, permission_gate=permission_gate
        )

    @provide(scope=Scope.REQUEST)
    def get_get_answer_use_case(
        self, answer_service: AnswerService, permission_gate: PermissionGate
    ) -> GetAnswerUseCase:
        """Provide get answer use case."""
        return GetAnswerUseCase(
            answer_service=answer_service, permission_gate=permission_gate
        )

    @provide(scope=Scope.REQUEST)
    def get_update_answer_use_case(
        self, answer_service: AnswerService
    ) -> UpdateAnswerUseCase:
        """Provide update answer use case."""
        return UpdateAnswerUseCase(answer_service=answer_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_answer_use_case(
        self, answer_service: AnswerService, permission_gate: PermissionGate
    ) -> DeleteAnswerUseCase:
        """Provide delete answer use case."""
        return DeleteAnswerUseCase(
            answer_service=answer_service, permission_gate=permission_gate
        )

    @provide(scope=Scope.REQUEST)
    def get_mark_answer_use_case(
        self, answer_service: AnswerService
    ) -> MarkAnswerUseCase:
        """Provide mark answer use case."""
        return MarkAnswerUseCase(answer_service=answer_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        question_service: QuestionService,
        answer_service: AnswerService,
        permission_gate: PermissionGate,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            question_service=question_service,
            answer_service=answer_service,
            permission_gate=permission_gate,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self,
        comment_service: CommentService,
        question_service: QuestionService,
        answer_service: AnswerService,
        permission_gate: PermissionGate,
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_service=comment_service,
            question_service=question_service,
            answer_service=answer_service,
            permission_gate=permission_gate,
        )

    # Vote and favorite use cases
    @provide(scope=Scope.REQUEST)
    def get_vote_use_case(
        self,
        vote_service: VoteService,
        question_service: QuestionService,
        answer_service: AnswerService,
    ) -> VoteUseCase:
        """Provide vote use case."""
        return VoteUseCase(
            vote_service=vote_service,
            question_service=question_service,
            answer_service=answer_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_favorite_use_case(
        self, favorite_service: FavoriteService, question_service: QuestionService
    ) -> FavoriteUseCase:
        """Provide favorite use case."""
        return FavoriteUseCase(
            favorite_service=favorite_service, question_service=question_service
        )

    # Tag use cases
    @provide(scope=Scope.REQUEST)
    def get_list_tags_use_case(self, tag_service: TagService) -> ListTagsUseCase:
        """Provide list tags use case."""
        return ListTagsUseCase(tag_service=tag_service)
