"""
Slack credentials — one bot token per workspace (team).

Tokens come from the caller or from the environment:

    SLACK_WORKSPACE_TOKENS="T0001=xoxb-aaa,T0002=xoxb-bbb"   # several workspaces
    SLACK_BOT_TOKEN="xoxb-aaa" SLACK_TEAM_ID="T0001"          # single-workspace shorthand

Explicit tokens win over the environment. There is no default token: an
action without a credential cannot do anything useful, so from_env() fails
loudly instead of building an empty config.
"""
import os

from pydantic import BaseModel, Field


class SlackConfig(BaseModel):
    """
    Fields:
        tokens — {workspace_id: bot token}
    """
    tokens: dict[str, str] = Field(default_factory=dict)

    def token_for(self, workspace_id: str) -> str | None:
        return self.tokens.get(workspace_id)

    @classmethod
    def from_env(cls, tokens: dict[str, str] | None = None) -> "SlackConfig":
        """
        Build a config from explicit tokens, falling back to env vars.

        Raises:
            ValueError — if no token is configured anywhere, or if
                         SLACK_WORKSPACE_TOKENS contains a malformed pair
        """
        if tokens:
            return cls(tokens=dict(tokens))

        resolved = _parse_workspace_tokens(os.environ.get("SLACK_WORKSPACE_TOKENS", ""))

        bot_token = os.environ.get("SLACK_BOT_TOKEN")
        team_id = os.environ.get("SLACK_TEAM_ID")
        if bot_token and team_id:
            resolved.setdefault(team_id, bot_token)

        if not resolved:
            raise ValueError(
                "No Slack token configured. Pass tokens= or set SLACK_WORKSPACE_TOKENS "
                "(TEAM_ID=xoxb-...,...) or SLACK_BOT_TOKEN together with SLACK_TEAM_ID."
            )
        return cls(tokens=resolved)


def _parse_workspace_tokens(raw: str) -> dict[str, str]:
    tokens = {}
    for pair in raw.split(","):
        pair = pair.strip()
        if not pair:
            continue
        team_id, sep, token = pair.partition("=")
        if not sep or not team_id.strip() or not token.strip():
            raise ValueError(
                f"Malformed SLACK_WORKSPACE_TOKENS entry: {pair.split('=')[0]!r}. "
                "Expected TEAM_ID=xoxb-..."
            )
        tokens[team_id.strip()] = token.strip()
    return tokens
