"""CLI to exercise the token dashboard GraphQL API.

Usage:
  dashboard-client health
  dashboard-client tokens
  dashboard-client token 1
  dashboard-client register alice s3cret
  dashboard-client --token <jwt> add 1 2.5
  dashboard-client --token <jwt> me

The session token can also come from the DASHBOARD_TOKEN environment variable.
"""
import argparse
import json
import os
import sys

import httpx

TOKEN_FIELDS = "id name symbol price priceChange24h volume30min liquidity marketCap"
USER_FIELDS = "id username recoveryPhrase portfolio { tokenId symbol amount value }"

TOKENS_QUERY = f"query {{ tokens {{ {TOKEN_FIELDS} }} }}"
TOKEN_QUERY = f"query Token($id: ID!) {{ token(id: $id) {{ {TOKEN_FIELDS} }} }}"
ME_QUERY = f"query {{ me {{ {USER_FIELDS} }} }}"
REGISTER_MUTATION = (
    "mutation Register($username: String!, $password: String!) "
    f"{{ register(username: $username, password: $password) {{ token user {{ {USER_FIELDS} }} }} }}"
)
LOGIN_MUTATION = (
    "mutation Login($username: String!, $password: String!) "
    f"{{ login(username: $username, password: $password) {{ token user {{ {USER_FIELDS} }} }} }}"
)
ADD_MUTATION = (
    "mutation Add($tokenId: ID!, $amount: Float!) "
    f"{{ addToPortfolio(tokenId: $tokenId, amount: $amount) {{ {USER_FIELDS} }} }}"
)
REMOVE_MUTATION = (
    "mutation Remove($tokenId: ID!) "
    f"{{ removeFromPortfolio(tokenId: $tokenId) {{ {USER_FIELDS} }} }}"
)


class GraphQLRequestError(Exception):
    """The server answered with a GraphQL errors list."""

    def __init__(self, errors: list[dict]) -> None:
        self.errors = errors
        codes = ", ".join(str((e.get("extensions") or {}).get("code", "?")) for e in errors)
        super().__init__(f"{errors[0].get('message', 'GraphQL error')} [{codes}]")


def print_json(data: object) -> None:
    print(json.dumps(data, indent=2, default=str))


def execute(
    client: httpx.Client,
    query: str,
    variables: dict | None = None,
    token: str | None = None,
) -> dict:
    """POST a GraphQL operation and return its data; raise GraphQLRequestError on errors."""
    headers = {"Authorization": f"Bearer {token}"} if token else {}
    r = client.post("/graphql", json={"query": query, "variables": variables or {}}, headers=headers)
    r.raise_for_status()
    body = r.json()
    if body.get("errors"):
        raise GraphQLRequestError(body["errors"])
    return body["data"]


def cmd_health(client: httpx.Client, _: argparse.Namespace) -> int:
    r = client.get("/")
    r.raise_for_status()
    print_json(r.json())
    return 0


def cmd_tokens(client: httpx.Client, args: argparse.Namespace) -> int:
    data = execute(client, TOKENS_QUERY)["tokens"]
    print(f"Found {len(data)} tokens")
    print_json(data[: args.head] if args.head else data)
    return 0


def cmd_token(client: httpx.Client, args: argparse.Namespace) -> int:
    data = execute(client, TOKEN_QUERY, {"id": args.token_id})["token"]
    if data is None:
        print(f"Token '{args.token_id}' not found", file=sys.stderr)
        return 1
    print_json(data)
    return 0


def cmd_register(client: httpx.Client, args: argparse.Namespace) -> int:
    variables = {"username": args.username, "password": args.password}
    print_json(execute(client, REGISTER_MUTATION, variables)["register"])
    return 0


def cmd_login(client: httpx.Client, args: argparse.Namespace) -> int:
    variables = {"username": args.username, "password": args.password}
    print_json(execute(client, LOGIN_MUTATION, variables)["login"])
    return 0


def cmd_me(client: httpx.Client, args: argparse.Namespace) -> int:
    data = execute(client, ME_QUERY, token=args.token)["me"]
    if data is None:
        print("Not authenticated", file=sys.stderr)
        return 1
    print_json(data)
    return 0


def cmd_add(client: httpx.Client, args: argparse.Namespace) -> int:
    variables = {"tokenId": args.token_id, "amount": args.amount}
    print_json(execute(client, ADD_MUTATION, variables, token=args.token)["addToPortfolio"])
    return 0


def cmd_remove(client: httpx.Client, args: argparse.Namespace) -> int:
    variables = {"tokenId": args.token_id}
    print_json(execute(client, REMOVE_MUTATION, variables, token=args.token)["removeFromPortfolio"])
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Exercise the token dashboard GraphQL API.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--base-url",
        default="http://localhost:4000",
        help="API base URL (default: http://localhost:4000)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=30.0,
        help="Request timeout in seconds (default: 30)",
    )
    parser.add_argument(
        "--token",
        default=os.getenv("DASHBOARD_TOKEN"),
        help="Session token for authenticated commands (default: $DASHBOARD_TOKEN)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True, help="Command")

    subparsers.add_parser("health", help="GET / health check")

    p = subparsers.add_parser("tokens", help="query tokens")
    p.add_argument("--head", type=int, default=0, help="Show only first N (0 = all)")
    p = subparsers.add_parser("token", help="query token(id)")
    p.add_argument("token_id", help="Token id (e.g. 1)")

    for name in ("register", "login"):
        p = subparsers.add_parser(name, help=f"mutation {name}")
        p.add_argument("username")
        p.add_argument("password")

    subparsers.add_parser("me", help="query me (requires --token)")

    p = subparsers.add_parser("add", help="mutation addToPortfolio (requires --token)")
    p.add_argument("token_id")
    p.add_argument("amount", type=float)
    p = subparsers.add_parser("remove", help="mutation removeFromPortfolio (requires --token)")
    p.add_argument("token_id")
    return parser


HANDLERS = {
    "health": cmd_health,
    "tokens": cmd_tokens,
    "token": cmd_token,
    "register": cmd_register,
    "login": cmd_login,
    "me": cmd_me,
    "add": cmd_add,
    "remove": cmd_remove,
}


def main(argv: list[str] | None = None, client: httpx.Client | None = None) -> int:
    """Parse argv and run one command. Pass client to reuse an existing httpx.Client."""
    args = build_parser().parse_args(argv)
    handler = HANDLERS[args.command]

    try:
        if client is not None:
            return handler(client, args)
        with httpx.Client(base_url=args.base_url.rstrip("/"), timeout=args.timeout) as own_client:
            return handler(own_client, args)
    except GraphQLRequestError as e:
        print(f"GraphQL error: {e}", file=sys.stderr)
        return 1
    except httpx.HTTPStatusError as e:
        print(f"HTTP error: {e.response.status_code}", file=sys.stderr)
        if e.response.content:
            print(e.response.text, file=sys.stderr)
        return 1
    except httpx.RequestError as e:
        print(f"Request error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
