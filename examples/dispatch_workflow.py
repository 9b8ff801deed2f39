#!/usr/bin/env python3
"""
ghdispatch - Dispatch Workflow Example

This example walks through the usual lifecycle:
1. Resolve the GitHub repository behind a local checkout
2. Authenticate (netrc token, or an interactive prompt)
3. Dispatch a repository_dispatch event, with and without a payload

Usage:
    python examples/dispatch_workflow.py [PATH] [EVENT_TYPE]
"""

import logging
import sys

from ghdispatch import GitHubSession, Settings, configure_logging, resolve_github_project
from ghdispatch.exceptions import GitHubError, RepositoryResolutionError


def main() -> None:
    """Run the dispatch workflow example."""
    print("=== ghdispatch Example ===\n")

    path = sys.argv[1] if len(sys.argv) > 1 else "."
    event_type = sys.argv[2] if len(sys.argv) > 2 else "build_staging"

    if "--verbose" in sys.argv:
        configure_logging(level=logging.DEBUG)

    # Step 1: Resolve the repository
    print("1. Resolving repository...")
    try:
        repository = resolve_github_project(path)
    except RepositoryResolutionError as e:
        print(f"   {e.message}")
        sys.exit(1)
    print(f"   Repository: {repository.repo_id}")

    with GitHubSession(settings=Settings.from_env()) as session:
        # Step 2: Authenticate
        print("\n2. Authenticating...")
        client = session.get_client()
        user = client.users.get_authenticated()
        print(f"   Logged in as: {user.login}")

        # Step 3: Dispatch
        print("\n3. Dispatching events...")
        try:
            result = session.dispatch_event(repository, event_type)
            print(f"   {result.message}")

            result = session.dispatch_event(
                repository, event_type, client_payload={"triggered_by": user.login}
            )
            print(f"   {result.message} (with payload)")
        except GitHubError as e:
            print(f"   Dispatch failed [{e.code}]: {e.message}")
            sys.exit(1)

    print("\n=== Example Complete ===")


if __name__ == "__main__":
    main()
