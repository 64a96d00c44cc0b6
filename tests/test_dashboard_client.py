import json

from fastapi.testclient import TestClient

from token_dashboard.cli.dashboard_client import main


def _run(client: TestClient, capsys, *argv: str) -> tuple[int, str, str]:
    code = main(list(argv), client=client)
    captured = capsys.readouterr()
    return code, captured.out, captured.err


def test_health_and_tokens(client: TestClient, capsys) -> None:
    code, out, _ = _run(client, capsys, "health")
    assert code == 0
    assert json.loads(out) == {"status": "ok"}

    code, out, _ = _run(client, capsys, "tokens", "--head", "2")
    assert code == 0
    assert out.startswith("Found 5 tokens")


def test_token_lookup(client: TestClient, capsys) -> None:
    code, out, _ = _run(client, capsys, "token", "3")
    assert code == 0
    assert json.loads(out)["symbol"] == "SRM"

    code, _, err = _run(client, capsys, "token", "missing")
    assert code == 1
    assert "not found" in err


def test_register_add_remove_me(client: TestClient, capsys) -> None:
    code, out, _ = _run(client, capsys, "register", "alice", "right")
    assert code == 0
    token = json.loads(out)["token"]

    code, out, _ = _run(client, capsys, "--token", token, "add", "1", "2")
    assert code == 0
    assert json.loads(out)["portfolio"][0]["amount"] == 2.0

    code, out, _ = _run(client, capsys, "--token", token, "remove", "1")
    assert code == 0
    assert json.loads(out)["portfolio"] == []

    code, out, _ = _run(client, capsys, "--token", token, "me")
    assert code == 0
    assert json.loads(out)["username"] == "alice"


def test_graphql_errors_exit_nonzero(client: TestClient, capsys) -> None:
    _run(client, capsys, "register", "alice", "right")
    code, _, err = _run(client, capsys, "login", "alice", "wrong")
    assert code == 1
    assert "INVALID_CREDENTIAL" in err

    code, _, err = _run(client, capsys, "--token", "bogus", "add", "1", "1")
    assert code == 1
    assert "UNAUTHENTICATED" in err

    code, _, err = _run(client, capsys, "--token", "bogus", "me")
    assert code == 1
    assert "Not authenticated" in err
