"""End-to-end tests for vote, favorite, tag and health routes."""

import pytest

from tests.conftest import ALICE, BOB, auth_headers


@pytest.fixture
def question(client):
    response = client.post(
        "/questions",
        json={"title": "How?", "content": "Details", "tags": ["plugins", "catalog"]},
        headers=auth_headers(ALICE),
    )
    return response.json()


class TestVotes:
    """Upvote and downvote routes."""

    def test_upvote_returns_enriched_question(self, client, question):
        response = client.get(
            f"/questions/{question['id']}/upvote", headers=auth_headers(BOB)
        )

        assert response.status_code == 200
        data = response.json()
        assert data["ownVote"] == 1
        assert data["score"] == 1
        assert data["own"] is False

    def test_revote_replaces_vote(self, client, question):
        """Up then down leaves a single down vote."""
        client.get(f"/questions/{question['id']}/upvote", headers=auth_headers(BOB))
        response = client.post(
            f"/questions/{question['id']}/downvote", headers=auth_headers(BOB)
        )

        assert response.json()["score"] == -1
        assert response.json()["ownVote"] == -1

    def test_vote_answer(self, client, question):
        answer = client.post(
            f"/questions/{question['id']}/answers",
            json={"answer": "A"},
            headers=auth_headers(BOB),
        ).json()

        response = client.get(
            f"/questions/{question['id']}/answers/{answer['id']}/downvote",
            headers=auth_headers(ALICE),
        )

        assert response.status_code == 200
        assert response.json()["ownVote"] == -1
        assert response.json()["own"] is False

    def test_vote_missing_question_is_404(self, client):
        response = client.get("/questions/999/upvote", headers=auth_headers(BOB))

        assert response.status_code == 404


class TestFavorites:
    def test_favorite_is_idempotent(self, client, question):
        url = f"/questions/{question['id']}/favorite"

        client.get(url, headers=auth_headers(BOB))
        response = client.get(url, headers=auth_headers(BOB))

        assert response.status_code == 200
        assert response.json()["favorite"] is True
        assert response.json()["favorites"] == 1

    def test_unfavorite_never_favorited(self, client, question):
        response = client.get(
            f"/questions/{question['id']}/unfavorite", headers=auth_headers(BOB)
        )

        assert response.status_code == 200
        assert response.json()["favorite"] is False

    def test_favorite_missing_question_is_404(self, client):
        response = client.post("/questions/999/favorite", headers=auth_headers(BOB))

        assert response.status_code == 404


class TestViewCounting:
    def test_mutations_do_not_count_as_views(self, client, question):
        """Only the detail read records a view, never a mutation's re-fetch."""
        qid = question["id"]

        vote = client.get(f"/questions/{qid}/upvote", headers=auth_headers(BOB))
        favorite = client.get(f"/questions/{qid}/favorite", headers=auth_headers(BOB))
        comment = client.post(
            f"/questions/{qid}/comments",
            json={"content": "Which version?"},
            headers=auth_headers(BOB),
        )

        assert vote.json()["views"] == 0
        assert favorite.json()["views"] == 0
        assert comment.json()["views"] == 0

        response = client.get(f"/questions/{qid}", headers=auth_headers(BOB))

        assert response.json()["views"] == 1


class TestTags:
    def test_tags_created_implicitly(self, client, question):
        response = client.get("/tags")

        assert response.status_code == 200
        assert response.json() == ["catalog", "plugins"]


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"
