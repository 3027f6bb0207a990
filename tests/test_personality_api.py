import pytest
from fastapi.testclient import TestClient

from trip_planner.main import app


@pytest.fixture
def client():
    return TestClient(app)


def test_questionnaire(client):
    body = client.get("/api/v1/personality/questions").json()

    assert body["totalQuestions"] == 44
    assert len(body["questions"]) == 44
    assert body["questions"][0] == {
        "id": 1,
        "text": "I see myself as someone who is talkative",
        "trait": "extraversion",
        "reversed": False,
    }
    assert [option["label"] for option in body["scale"]] == [
        "Strongly Disagree", "Disagree", "Neutral", "Agree", "Strongly Agree"
    ]


def test_scores_for_no_answers(client):
    body = client.post("/api/v1/personality/scores", json={"responses": []}).json()

    assert body["scores"] == {
        "openness": 50, "conscientiousness": 50, "extraversion": 50, "agreeableness": 50, "neuroticism": 50
    }
    assert body["labels"]["openness"] == "Moderate"
    assert body["complete"] is False
    assert len(body["missingQuestionIds"]) == 44


def test_scores_keep_last_answer_per_question(client):
    body = client.post("/api/v1/personality/scores", json={"responses": [
        {"questionId": 1, "value": 1},
        {"questionId": 1, "value": 5},
    ]}).json()

    assert body["scores"]["extraversion"] == 100
    assert len(body["missingQuestionIds"]) == 43


@pytest.mark.parametrize("value", [0, 6, 2.5, "3"])
def test_out_of_range_answers_are_rejected(client, value):
    response = client.post("/api/v1/personality/scores", json={"responses": [{"questionId": 1, "value": value}]})

    assert response.status_code == 400
    assert response.json()["error"].startswith("Invalid request:")


def test_influence(client):
    body = client.post("/api/v1/personality/influence", json={
        "openness": 80, "conscientiousness": 50, "extraversion": 20, "agreeableness": 50, "neuroticism": 30
    }).json()

    assert body["influence"]["preferredActivities"] == ["cultural", "historical", "adventure", "nature"]
    assert body["influence"]["avoidedActivities"] == ["nightlife"]
    assert body["recommendations"]["highly_recommended"] == ["cultural", "historical", "adventure"]
    assert body["explanation"].startswith("Your high openness")


def test_influence_rejects_scores_out_of_range(client):
    response = client.post("/api/v1/personality/influence", json={
        "openness": 101, "conscientiousness": 50, "extraversion": 20, "agreeableness": 50, "neuroticism": 30
    })
    assert response.status_code == 400
