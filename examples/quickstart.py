"""Toolgate quickstart — govern a batch of tool calls before running them."""

import asyncio

from toolgate import (
    GovernanceMode,
    GovernanceSettings,
    Permission,
    PermissionConfirmation,
    PrincipalType,
    ToolRequest,
    build_manager,
    partition,
)


async def main() -> None:
    manager = build_manager(GovernanceSettings(max_repetitions=2))

    for turn in range(3):
        batch = [ToolRequest(id=f"turn{turn}-fetch", tool_name="fetch_user", arguments={"id": 123})]
        results = await manager.inspect_tools(batch, [], GovernanceMode.APPROVE)
        decision = partition(batch, results)

        # A real reply loop would prompt here
        for request in list(decision.needs_approval):
            decision.confirm(
                request.id,
                PermissionConfirmation(principal_type=PrincipalType.TOOL, permission=Permission.ALLOW_ONCE),
            )

        print(f"turn {turn}: approved={[r.id for r in decision.approved]} denied={[r.id for r in decision.denied]}")


if __name__ == "__main__":
    asyncio.run(main())
