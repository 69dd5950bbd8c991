#!/usr/bin/env python3
"""Obtain a user access token with the authorization code flow.

Run it, open the printed URL, approve, then paste the ``code`` query
parameter from the redirect.
"""

from __future__ import annotations

import argparse
import asyncio
import os
import secrets

from malapi import MALClient, OAuthClient, is_error


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="MyAnimeList OAuth2 authorization code flow")
    p.add_argument("--client-id", default=os.environ.get("MAL_CLIENT_ID"))
    p.add_argument("--client-secret", default=os.environ.get("MAL_CLIENT_SECRET"))
    p.add_argument("--redirect-uri", default=None)
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    if not args.client_id:
        raise SystemExit("Set MAL_CLIENT_ID or pass --client-id")

    async with OAuthClient(
        args.client_id, args.client_secret, redirect_uri=args.redirect_uri
    ) as oauth:
        request = oauth.authorization_request(state=secrets.token_urlsafe(16))
        print("Open this URL and approve access:")
        print(request.url)
        code = input("code: ").strip()

        tokens = await oauth.exchange_code(code, request.code_verifier)
        if is_error(tokens):
            raise SystemExit(f"Token exchange failed: {tokens.error} {tokens.message or ''}")

    print(f"access_token expires in {tokens.expires_in}s")
    print(f"refresh_token: {tokens.refresh_token}")

    async with MALClient(client_id=args.client_id, access_token=tokens.access_token) as mal:
        me = await mal.get_user_info(fields={"anime_statistics": True})
        if is_error(me):
            raise SystemExit(f"Could not load profile: {me.error}")
        print(f"Signed in as {me.name} (id {me.id})")


if __name__ == "__main__":
    asyncio.run(main())
