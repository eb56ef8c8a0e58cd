"""
Slack actions data models.

These Pydantic models define the shape of every object that flows through a
single action invocation. Nothing here outlives one compute() call.

Data flow through a single action:

    PresenceRequest / PostMessageRequest  — built from the action's parameters + the workspace token
    ActionOutcome                         — what evaluate() returns; fail-soft results live here
    ClientSession                         — routing key the host runtime uses to continue in a channel

Fatal conditions are never an ActionOutcome — they are raised as ActionError
(see errors.py). The outcome kind only covers the results a caller should
handle as normal control flow.
"""
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class ActionOutcome(BaseModel):
    """
    Result of one action evaluation.

    Fields:
        action  — name of the action that produced it (e.g. "is_online")
        kind    — "ok"        = the API call went through and was accepted
                  "not_found" = an identifier could not be resolved (fail-soft)
                  "rejected"  = Slack answered ok=false (fail-soft, logged)
        value   — what compute() hands back to the runtime (bool for is_online, None for posts)
        detail  — extra diagnostic data, e.g. the Slack error code on rejection
    """
    action: str
    kind: Literal["ok", "not_found", "rejected"]
    value: Any = None
    detail: dict = Field(default_factory=dict)

    @property
    def succeeded(self) -> bool:
        return self.kind == "ok"


class ClientSession(BaseModel):
    """
    Routing key for follow-up conversation turns.

    Two sessions built from the same (workspace_id, channel) pair compare
    equal and hash the same, so the runtime can use them as dict keys.
    """
    model_config = ConfigDict(frozen=True)

    workspace_id: str
    channel: str

    @property
    def session_id(self) -> str:
        return f"{self.workspace_id}@{self.channel}"


class PresenceRequest(BaseModel):
    """Arguments for users.getPresence."""
    token: str
    user: str

    def to_api_kwargs(self) -> dict:
        return {"token": self.token, "user": self.user}

    def __str__(self) -> str:
        return f"PresenceRequest(user={self.user!r})"

    __repr__ = __str__


class PostMessageRequest(BaseModel):
    """
    Arguments for chat.postMessage with Block Kit content.

    blocks are passed to Slack verbatim — plain dicts or slack_sdk Block
    objects, never inspected here. The token is left out of str()/repr()
    because requests are embedded in log lines and exception messages.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    token: str
    channel: str
    blocks: list
    unfurl_links: bool = True
    unfurl_media: bool = True

    def to_api_kwargs(self) -> dict:
        return {
            "token": self.token,
            "channel": self.channel,
            "blocks": self.blocks,
            "unfurl_links": self.unfurl_links,
            "unfurl_media": self.unfurl_media,
        }

    def __str__(self) -> str:
        return (
            f"PostMessageRequest(channel={self.channel!r}, blocks={self.blocks!r}, "
            f"unfurl_links={self.unfurl_links}, unfurl_media={self.unfurl_media})"
        )

    __repr__ = __str__
