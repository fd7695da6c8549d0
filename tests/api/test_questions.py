"""Tests for question and answer endpoints."""

from fastapi import status

from stackit.models import Question


def test_list_questions(client, test_question, test_answer) -> None:
    response = client.get("/api/questions")
    assert response.status_code == status.HTTP_200_OK
    [row] = response.json()
    assert row["id"] == test_question.id
    assert row["author"] == "alice"
    assert row["tags"] == ["css", "html"]
    assert row["votes"] == 0
    assert row["viewCount"] == 0
    assert row["answerCount"] == 1
    assert "createdAt" in row


def test_create_question(client, auth_token, db_session) -> None:
    response = client.post(
        "/api/questions",
        json={"title": "Tabs or spaces?", "content": "Settle it.", "tags": ["style", " style "]},
        headers=auth_token,
    )
    assert response.status_code == status.HTTP_201_CREATED
    body = response.json()
    assert body["message"] == "Question created successfully"

    question = db_session.get(Question, body["id"])
    assert question.tags == ["style"]


def test_guest_cannot_create_question(client, guest_auth_token, db_session) -> None:
    response = client.post(
        "/api/questions",
        json={"title": "Hi", "content": "Body"},
        headers=guest_auth_token,
    )
    assert response.status_code == status.HTTP_403_FORBIDDEN
    assert response.json()["detail"] == "Guests cannot create questions"
    assert db_session.query(Question).count() == 0


def test_create_question_requires_token(client) -> None:
    response = client.post("/api/questions", json={"title": "Hi", "content": "Body"})
    assert response.status_code in {status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN}


def test_create_question_validates_body(client, auth_token) -> None:
    response = client.post("/api/questions", json={"title": "", "content": "x"}, headers=auth_token)
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_get_question_counts_views(client, test_question, test_answer) -> None:
    first = client.get(f"/api/questions/{test_question.id}")
    second = client.get(f"/api/questions/{test_question.id}")

    assert first.status_code == status.HTTP_200_OK
    assert first.json()["viewCount"] == 1
    assert second.json()["viewCount"] == 2
    [answer] = second.json()["answers"]
    assert answer["id"] == test_answer.id
    assert answer["author"] == "bob"
    assert answer["isAccepted"] is False


def test_get_missing_question(client) -> None:
    response = client.get("/api/questions/999")
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["detail"] == "Question not found"


def test_post_answer(client, other_auth_token, test_question) -> None:
    response = client.post(
        f"/api/questions/{test_question.id}/answers",
        json={"content": "Use flexbox and align-items."},
        headers=other_auth_token,
    )
    assert response.status_code == status.HTTP_201_CREATED
    assert response.json()["message"] == "Answer created successfully"


def test_guest_cannot_answer(client, guest_auth_token, test_question) -> None:
    response = client.post(
        f"/api/questions/{test_question.id}/answers",
        json={"content": "Hello"},
        headers=guest_auth_token,
    )
    assert response.status_code == status.HTTP_403_FORBIDDEN


def test_delete_question_by_author(client, auth_token, test_question, test_answer) -> None:
    response = client.delete(f"/api/questions/{test_question.id}", headers=auth_token)
    assert response.status_code == status.HTTP_200_OK

    assert client.get(f"/api/questions/{test_question.id}").status_code == status.HTTP_404_NOT_FOUND
    assert client.get("/api/questions").json() == []


def test_delete_question_by_stranger(client, other_auth_token, test_question) -> None:
    response = client.delete(f"/api/questions/{test_question.id}", headers=other_auth_token)
    assert response.status_code == status.HTTP_403_FORBIDDEN


def test_delete_question_by_admin(client, admin_auth_token, test_question) -> None:
    response = client.delete(f"/api/questions/{test_question.id}", headers=admin_auth_token)
    assert response.status_code == status.HTTP_200_OK
