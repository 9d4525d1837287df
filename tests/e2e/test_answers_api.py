"""End-to-end tests for answer and comment routes."""

import pytest

from tests.conftest import ALICE, BOB, auth_headers

CAROL = "user:default/carol"


@pytest.fixture
def question(client):
    response = client.post(
        "/questions",
        json={"title": "How?", "content": "Details"},
        headers=auth_headers(ALICE),
    )
    return response.json()


def _answer(client, question_id, viewer=BOB, text="Like this"):
    response = client.post(
        f"/questions/{question_id}/answers",
        json={"answer": text},
        headers=auth_headers(viewer),
    )
    assert response.status_code == 201
    return response.json()


class TestAnswers:
    """Answer create, read, update and delete."""

    def test_create_answer(self, client, question):
        data = _answer(client, question["id"])

        assert data["questionId"] == question["id"]
        assert data["own"] is True
        assert data["correct"] is False
        assert "ownVote" not in data

    def test_empty_answer_rejected(self, client, question):
        response = client.post(
            f"/questions/{question['id']}/answers",
            json={"answer": ""},
            headers=auth_headers(BOB),
        )

        assert response.status_code == 400

    def test_answer_missing_question_is_404(self, client):
        response = client.post(
            "/questions/999/answers", json={"answer": "A"}, headers=auth_headers(BOB)
        )

        assert response.status_code == 404

    def test_answers_included_in_question_detail(self, client, question):
        answer = _answer(client, question["id"])

        detail = client.get(
            f"/questions/{question['id']}", headers=auth_headers(ALICE)
        ).json()

        assert detail["answersCount"] == 1
        assert detail["answers"][0]["id"] == answer["id"]
        assert detail["answers"][0]["own"] is False

    def test_update_answer_returns_201(self, client, question):
        answer = _answer(client, question["id"])

        response = client.post(
            f"/questions/{question['id']}/answers/{answer['id']}",
            json={"answer": "Better"},
            headers=auth_headers(BOB),
        )

        assert response.status_code == 201
        assert response.json()["content"] == "Better"

    def test_update_by_non_author_is_404(self, client, question):
        answer = _answer(client, question["id"])

        response = client.post(
            f"/questions/{question['id']}/answers/{answer['id']}",
            json={"answer": "Hijack"},
            headers=auth_headers(ALICE),
        )

        assert response.status_code == 404

    def test_answer_under_wrong_question_is_404(self, client, question):
        other = client.post(
            "/questions", json={"title": "T", "content": "C"}, headers=auth_headers(ALICE)
        ).json()
        answer = _answer(client, question["id"])

        response = client.get(
            f"/questions/{other['id']}/answers/{answer['id']}",
            headers=auth_headers(ALICE),
        )

        assert response.status_code == 404

    def test_delete_answer(self, client, question):
        answer = _answer(client, question["id"])
        url = f"/questions/{question['id']}/answers/{answer['id']}"

        assert client.delete(url, headers=auth_headers(ALICE)).status_code == 404
        assert client.delete(url, headers=auth_headers(BOB)).status_code == 200
        assert client.get(url, headers=auth_headers(BOB)).status_code == 404


class TestCorrectAnswer:
    """GET|POST /questions/{id}/answers/{answerId}/correct|incorrect."""

    def test_question_author_marks_correct(self, client, question):
        answer = _answer(client, question["id"])

        response = client.get(
            f"/questions/{question['id']}/answers/{answer['id']}/correct",
            headers=auth_headers(ALICE),
        )

        assert response.status_code == 200
        assert response.content == b""
        detail = client.get(
            f"/questions/{question['id']}", headers=auth_headers(ALICE)
        ).json()
        assert detail["correctAnswer"] is True

    def test_marking_another_answer_moves_the_flag(self, client, question):
        """Only one answer of a question is correct at a time."""
        first = _answer(client, question["id"], viewer=BOB)
        second = _answer(client, question["id"], viewer=CAROL)
        base = f"/questions/{question['id']}/answers"

        client.post(f"{base}/{first['id']}/correct", headers=auth_headers(ALICE))
        client.post(f"{base}/{second['id']}/correct", headers=auth_headers(ALICE))

        detail = client.get(
            f"/questions/{question['id']}", headers=auth_headers(ALICE)
        ).json()
        flags = {a["id"]: a["correct"] for a in detail["answers"]}
        assert flags == {first["id"]: False, second["id"]: True}

    def test_non_author_cannot_mark(self, client, question):
        """A non-author mark attempt fails and changes nothing."""
        answer = _answer(client, question["id"])

        response = client.get(
            f"/questions/{question['id']}/answers/{answer['id']}/correct",
            headers=auth_headers(BOB),
        )

        assert response.status_code != 200
        detail = client.get(
            f"/questions/{question['id']}", headers=auth_headers(ALICE)
        ).json()
        assert detail["correctAnswer"] is False

    def test_mark_incorrect(self, client, question):
        answer = _answer(client, question["id"])
        base = f"/questions/{question['id']}/answers/{answer['id']}"
        client.get(f"{base}/correct", headers=auth_headers(ALICE))

        response = client.get(f"{base}/incorrect", headers=auth_headers(ALICE))

        assert response.status_code == 200
        assert client.get(base, headers=auth_headers(ALICE)).json()["correct"] is False


class TestComments:
    """Comment routes on questions and answers."""

    def test_comment_question_returns_question(self, client, question):
        response = client.post(
            f"/questions/{question['id']}/comments",
            json={"content": "Which version?"},
            headers=auth_headers(BOB),
        )

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == question["id"]
        assert data["comments"][0]["content"] == "Which version?"
        assert data["comments"][0]["own"] is True

    def test_delete_question_comment(self, client, question):
        comment = client.post(
            f"/questions/{question['id']}/comments",
            json={"content": "Hmm"},
            headers=auth_headers(BOB),
        ).json()["comments"][0]
        url = f"/questions/{question['id']}/comments/{comment['id']}"

        assert client.delete(url, headers=auth_headers(ALICE)).status_code == 404
        response = client.delete(url, headers=auth_headers(BOB))

        assert response.status_code == 200
        assert response.json()["comments"] == []

    def test_comment_answer_returns_201(self, client, question):
        answer = _answer(client, question["id"])

        response = client.post(
            f"/questions/{question['id']}/answers/{answer['id']}/comments",
            json={"content": "Thanks"},
            headers=auth_headers(ALICE),
        )

        assert response.status_code == 201
        assert response.json()["id"] == answer["id"]
        assert response.json()["comments"][0]["content"] == "Thanks"

    def test_delete_answer_comment(self, client, question):
        answer = _answer(client, question["id"])
        base = f"/questions/{question['id']}/answers/{answer['id']}/comments"
        comment = client.post(
            base, json={"content": "Thanks"}, headers=auth_headers(ALICE)
        ).json()["comments"][0]

        response = client.delete(f"{base}/{comment['id']}", headers=auth_headers(ALICE))

        assert response.status_code == 201
        assert response.json()["comments"] == []

    def test_empty_comment_rejected(self, client, question):
        response = client.post(
            f"/questions/{question['id']}/comments",
            json={"content": ""},
            headers=auth_headers(BOB),
        )

        assert response.status_code == 400
