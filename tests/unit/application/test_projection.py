"""Unit tests for response projections."""

from qeta.application.projection import (
    enrich_answer,
    enrich_question,
    own_vote,
    summarize_question,
)
from qeta.domain.model import Answer, Comment, Vote
from qeta.domain.value import (
    AnswerId,
    CommentId,
    QuestionId,
    TargetType,
    ViewerId,
    VoteScore,
)
from tests.conftest import ALICE, BOB, make_question


def _vote(voter: ViewerId, score: VoteScore, target_type=TargetType.QUESTION) -> Vote:
    return Vote(voter=voter, target_type=target_type, target_id=1, score=score)


def _answer(author: ViewerId, votes: list[Vote] | None = None) -> Answer:
    return Answer(
        id=AnswerId(7),
        question_id=QuestionId(1),
        author=author,
        content="Answer",
        votes=votes or [],
    )


class TestOwnVote:
    def test_returns_viewer_score(self):
        votes = [_vote(BOB, VoteScore.DOWN), _vote(ALICE, VoteScore.UP)]

        assert own_vote(ALICE, votes) == 1
        assert own_vote(BOB, votes) == -1

    def test_none_without_vote(self):
        assert own_vote(ALICE, [_vote(BOB, VoteScore.UP)]) is None


class TestEnrichQuestion:
    """Tests for enrich_question."""

    def test_own_iff_author_is_viewer(self):
        """own should hold exactly when the viewer wrote the question."""
        question = make_question(author=ALICE)

        assert enrich_question(ALICE, question).own is True
        assert enrich_question(BOB, question).own is False

    def test_viewer_relative_fields(self):
        """Each viewer should see only their own vote and favorite."""
        question = make_question(
            votes=[_vote(BOB, VoteScore.UP)],
            favorited_by=[BOB],
            favorites=1,
        )

        for_bob = enrich_question(BOB, question)
        for_alice = enrich_question(ALICE, question)

        assert for_bob.own_vote == 1
        assert for_bob.favorite is True
        assert for_alice.own_vote is None
        assert for_alice.favorite is False
        assert for_alice.favorites == 1

    def test_answers_and_comments_are_enriched_separately(self):
        """Nested answers should use their own author and votes."""
        answer = _answer(
            BOB, votes=[_vote(ALICE, VoteScore.DOWN, target_type=TargetType.ANSWER)]
        )
        comment = Comment(
            id=CommentId(3),
            target_type=TargetType.QUESTION,
            target_id=1,
            author=BOB,
            content="Comment",
        )
        question = make_question(
            author=ALICE,
            answers=[answer],
            comments=[comment],
            votes=[_vote(ALICE, VoteScore.UP)],
        )

        view = enrich_question(ALICE, question)

        assert view.own is True
        assert view.own_vote == 1
        assert view.answers[0].own is False
        assert view.answers[0].own_vote == -1
        assert view.comments[0].own is False

    def test_none_passes_through(self):
        assert enrich_question(ALICE, None) is None
        assert enrich_answer(ALICE, None) is None

    def test_serializes_camel_case_without_absent_vote(self):
        """ownVote should be absent, not null, when the viewer hasn't voted."""
        payload = enrich_question(ALICE, make_question()).model_dump(
            by_alias=True, exclude_none=True
        )

        assert payload["own"] is True
        assert "ownVote" not in payload
        assert "answersCount" in payload
        assert "correctAnswer" in payload


class TestEnrichAnswer:
    def test_own_and_own_vote(self):
        answer = _answer(BOB, votes=[_vote(BOB, VoteScore.UP, TargetType.ANSWER)])

        view = enrich_answer(BOB, answer)

        assert view.own is True
        assert view.own_vote == 1
        assert view.model_dump(by_alias=True)["questionId"] == 1


class TestSummarizeQuestion:
    def test_summary_has_no_viewer_fields(self):
        """Listings are the same for every viewer."""
        payload = summarize_question(
            make_question(votes=[_vote(ALICE, VoteScore.UP)], score=1)
        ).model_dump(by_alias=True)

        assert "own" not in payload
        assert "ownVote" not in payload
        assert "favorite" not in payload
        assert payload["score"] == 1
