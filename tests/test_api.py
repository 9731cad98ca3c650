import pytest
from fastapi.testclient import TestClient

from app.config import Settings, get_settings
from app.main import app


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}

def test_parse_returns_both_trees(client):
    res = client.post("/parse", json={"expression": "(1+2)*3"})
    assert res.status_code == 200
    body = res.json()
    assert body["parseTree"]["operator"] == "*"
    assert body["parseTree"]["left"]["left"] == {"type": "Number", "value": "1"}
    assert body["ast"]["left"]["left"] == {"type": "Literal", "value": "1"}
    assert body["ast"]["right"] == {"type": "Literal", "value": "3"}

def test_parse_function_call(client):
    body = client.post("/parse", json={"expression": "max(1, 2)"}).json()
    assert body["ast"]["type"] == "FunctionCall"
    assert [a["value"] for a in body["ast"]["arguments"]] == ["1", "2"]

def test_lex_error_is_400(client):
    res = client.post("/parse", json={"expression": "1+$2"})
    assert res.status_code == 400
    assert res.json()["detail"] == "Unexpected character '$' at position 2"

def test_parse_error_is_400(client):
    res = client.post("/parse", json={"expression": "+1"})
    assert res.status_code == 400
    assert "Unexpected token OPERATOR '+'" in res.json()["detail"]

def test_missing_expression_is_422(client):
    assert client.post("/parse", json={}).status_code == 422

@pytest.mark.parametrize("value", [12, 1.5, None, ["1+2"], True])
def test_non_string_expression_is_422(client, value):
    assert client.post("/parse", json={"expression": value}).status_code == 422

def test_long_chain_is_200(client):
    n = 5000
    res = client.post("/parse", json={"expression": "+".join(["1"] * n)})
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("application/json")
    assert res.text.startswith('{"parseTree": {"type": "BinaryExpression", "operator": "+"')
    assert res.text.count('"Number"') == n
    assert res.text.count('"Literal"') == n

def test_deep_parentheses_is_400(client):
    res = client.post("/parse", json={"expression": "(" * 2000 + "1" + ")" * 2000})
    assert res.status_code == 400
    assert "nested too deeply" in res.json()["detail"]

def test_trailing_tokens_follow_settings(client):
    assert client.post("/parse", json={"expression": "1 2"}).status_code == 400
    app.dependency_overrides[get_settings] = lambda: Settings(allow_trailing=True)
    res = client.post("/parse", json={"expression": "1 2"})
    assert res.status_code == 200
    assert res.json()["ast"] == {"type": "Literal", "value": "1"}

def test_inspect(client):
    res = client.post("/inspect", json={"expression": "max(1, 2) - 3"})
    assert res.status_code == 200
    body = res.json()
    assert body["infix"] == "(max(1, 2) - 3)"
    assert body["literals"] == ["1", "2", "3"]
    assert body["functions"] == ["max"]
    assert body["operators"] == ["-"]
    assert body["depth"] == 3
    assert body["pretty"].splitlines()[0] == "BinaryExpression(-)"

def test_inspect_error(client):
    assert client.post("/inspect", json={"expression": "max(1"}).status_code == 400
