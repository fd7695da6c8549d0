"""Tests for answer acceptance and deletion endpoints."""

from fastapi import status


def test_question_author_accepts(client, auth_token, test_question, test_answer) -> None:
    response = client.post(f"/api/answers/{test_answer.id}/accept", headers=auth_token)
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"message": "Answer accepted successfully"}

    detail = client.get(f"/api/questions/{test_question.id}").json()
    assert detail["answers"][0]["isAccepted"] is True


def test_accept_is_idempotent(client, auth_token, test_question, test_answer) -> None:
    for _ in range(2):
        response = client.post(f"/api/answers/{test_answer.id}/accept", headers=auth_token)
        assert response.status_code == status.HTTP_200_OK

    answers = client.get(f"/api/questions/{test_question.id}").json()["answers"]
    assert [a["isAccepted"] for a in answers] == [True]


def test_only_question_author_accepts(client, other_auth_token, test_answer) -> None:
    response = client.post(f"/api/answers/{test_answer.id}/accept", headers=other_auth_token)
    assert response.status_code == status.HTTP_403_FORBIDDEN
    assert response.json()["detail"] == "Only question author can accept answers"


def test_accept_missing_answer(client, auth_token) -> None:
    response = client.post("/api/answers/999/accept", headers=auth_token)
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_delete_answer(client, other_auth_token, test_question, test_answer) -> None:
    response = client.delete(f"/api/answers/{test_answer.id}", headers=other_auth_token)
    assert response.status_code == status.HTTP_200_OK

    assert client.get(f"/api/questions/{test_question.id}").json()["answers"] == []


def test_delete_answer_forbidden_for_stranger(client, auth_token, test_answer) -> None:
    response = client.delete(f"/api/answers/{test_answer.id}", headers=auth_token)
    assert response.status_code == status.HTTP_403_FORBIDDEN
