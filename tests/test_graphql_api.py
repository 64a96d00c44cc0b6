import pytest
from fastapi.testclient import TestClient

from token_dashboard.config import Settings
from token_dashboard.gql import parse_bearer
from token_dashboard.main import create_app

USER_FIELDS = "id username recoveryPhrase portfolio { tokenId symbol amount value }"

REGISTER = (
    "mutation($u: String!, $p: String!) "
    f"{{ register(username: $u, password: $p) {{ token user {{ {USER_FIELDS} }} }} }}"
)
LOGIN = (
    "mutation($u: String!, $p: String!) "
    f"{{ login(username: $u, password: $p) {{ token user {{ id username }} }} }}"
)
ADD = (
    "mutation($id: ID!, $amount: Float!) "
    f"{{ addToPortfolio(tokenId: $id, amount: $amount) {{ {USER_FIELDS} }} }}"
)
REMOVE = f"mutation($id: ID!) {{ removeFromPortfolio(tokenId: $id) {{ {USER_FIELDS} }} }}"
ME = f"{{ me {{ {USER_FIELDS} }} }}"


def gql(client: TestClient, query: str, variables: dict | None = None, token: str | None = None) -> dict:
    headers = {"Authorization": f"Bearer {token}"} if token else {}
    r = client.post("/graphql", json={"query": query, "variables": variables or {}}, headers=headers)
    assert r.status_code == 200
    return r.json()


def error_code(body: dict) -> str:
    return body["errors"][0]["extensions"]["code"]


def register(client: TestClient, username: str = "alice", password: str = "right") -> dict:
    body = gql(client, REGISTER, {"u": username, "p": password})
    assert "errors" not in body
    return body["data"]["register"]


def test_health(client: TestClient) -> None:
    r = client.get("/")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_tokens_query(client: TestClient) -> None:
    body = gql(
        client,
        "{ tokens { id name symbol price priceChange24h volume30min liquidity marketCap } }",
    )
    tokens = body["data"]["tokens"]
    assert [t["symbol"] for t in tokens] == ["SOL", "RAY", "SRM", "BONK", "JUP"]
    assert tokens[0] == {
        "id": "1",
        "name": "Solana",
        "symbol": "SOL",
        "price": 98.45,
        "priceChange24h": 5.23,
        "volume30min": 1250000.0,
        "liquidity": 45000000.0,
        "marketCap": 45000000000.0,
    }


def test_token_query(client: TestClient) -> None:
    body = gql(client, 'query($id: ID!) { token(id: $id) { symbol } }', {"id": "5"})
    assert body["data"]["token"] == {"symbol": "JUP"}


def test_token_query_unknown_id_is_null(client: TestClient) -> None:
    body = gql(client, '{ token(id: "nope") { symbol } }')
    assert "errors" not in body
    assert body["data"]["token"] is None


def test_register_returns_token_user_and_recovery_phrase(client: TestClient) -> None:
    payload = register(client)
    assert payload["token"]
    assert payload["user"]["username"] == "alice"
    assert len(payload["user"]["recoveryPhrase"].split()) == 24
    assert payload["user"]["portfolio"] == []


def test_register_duplicate_username(client: TestClient) -> None:
    register(client)
    body = gql(client, REGISTER, {"u": "alice", "p": "other"})
    assert body["errors"][0]["message"] == "Username already exists"
    assert error_code(body) == "DUPLICATE_USERNAME"


def test_login_errors(client: TestClient) -> None:
    register(client)
    body = gql(client, LOGIN, {"u": "alice", "p": "wrong"})
    assert error_code(body) == "INVALID_CREDENTIAL"
    body = gql(client, LOGIN, {"u": "bob", "p": "right"})
    assert error_code(body) == "NOT_FOUND"


def test_login_token_authenticates_me(client: TestClient) -> None:
    registered = register(client)
    login = gql(client, LOGIN, {"u": "alice", "p": "right"})["data"]["login"]
    me = gql(client, ME, token=login["token"])["data"]["me"]
    assert me["id"] == registered["user"]["id"]
    assert me["username"] == "alice"


def test_me_is_null_when_anonymous(client: TestClient) -> None:
    body = gql(client, ME)
    assert "errors" not in body
    assert body["data"]["me"] is None


@pytest.mark.parametrize("token", ["garbage", "a.b.c"])
def test_invalid_credential_degrades_to_unauthenticated(client: TestClient, token: str) -> None:
    register(client)
    assert gql(client, ME, token=token)["data"]["me"] is None
    body = gql(client, ADD, {"id": "1", "amount": 1.0}, token=token)
    assert error_code(body) == "UNAUTHENTICATED"
    assert body["errors"][0]["message"] == "Not authenticated"
    body = gql(client, REMOVE, {"id": "1"}, token=token)
    assert error_code(body) == "UNAUTHENTICATED"


def test_portfolio_flow(client: TestClient) -> None:
    token = register(client)["token"]
    gql(client, ADD, {"id": "1", "amount": 10.0}, token=token)
    user = gql(client, ADD, {"id": "1", "amount": 5.0}, token=token)["data"]["addToPortfolio"]
    assert user["portfolio"] == [
        {"tokenId": "1", "symbol": "SOL", "amount": 15.0, "value": pytest.approx(15 * 98.45)}
    ]

    user = gql(client, ADD, {"id": "2", "amount": 2.0}, token=token)["data"]["addToPortfolio"]
    assert [i["tokenId"] for i in user["portfolio"]] == ["1", "2"]

    user = gql(client, REMOVE, {"id": "1"}, token=token)["data"]["removeFromPortfolio"]
    assert [i["tokenId"] for i in user["portfolio"]] == ["2"]

    user = gql(client, REMOVE, {"id": "4"}, token=token)["data"]["removeFromPortfolio"]
    assert [i["tokenId"] for i in user["portfolio"]] == ["2"]

    me = gql(client, ME, token=token)["data"]["me"]
    assert [i["tokenId"] for i in me["portfolio"]] == ["2"]


def test_add_unknown_token_and_bad_amount(client: TestClient) -> None:
    token = register(client)["token"]
    body = gql(client, ADD, {"id": "99", "amount": 1.0}, token=token)
    assert error_code(body) == "TOKEN_NOT_FOUND"
    body = gql(client, ADD, {"id": "1", "amount": -1.0}, token=token)
    assert error_code(body) == "INVALID_AMOUNT"


def test_accounts_are_isolated_per_app(settings: Settings) -> None:
    with TestClient(create_app(settings)) as first:
        register(first)
    with TestClient(create_app(settings)) as second:
        register(second)


@pytest.mark.parametrize(
    ("header", "expected"),
    [
        (None, None),
        ("", None),
        ("Bearer abc", "abc"),
        ("bearer abc", "abc"),
        ("abc", "abc"),
        ("Bearer ", None),
        ("Bearer", None),
        ("  Bearer   abc  ", "abc"),
    ],
)
def test_parse_bearer(header: str | None, expected: str | None) -> None:
    assert parse_bearer(header) == expected
