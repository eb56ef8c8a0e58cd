"""
Slack platform facade — tokens, ID resolution, and the Web API client.

Actions never talk to slack-sdk configuration directly. They go through the
facade, which answers five questions scoped by workspace:

    get_slack_token(workspace_id)                   -> bot token
    get_user_id(workspace_id, name)                 -> user ID or None
    get_channel_id(workspace_id, channel)           -> channel ID (raises if unknown)
    get_client()                                    -> WebClient
    create_session_from_channel(workspace_id, ch)   -> ClientSession

PlatformFacade is the protocol actions depend on; tests pass a MagicMock,
production code passes a SlackPlatform.

Resolution caches
------------------
Users and channels are loaded lazily, one full paginated listing per
workspace. A miss reloads that workspace once, so members and channels added
after the first lookup are found; invalidate(workspace_id) drops the cache
outright. A user can be matched by ID, handle (name), or real name; a channel
by ID or name, with or without the leading "#".

Failure policy
---------------
Unknown user    -> None. Callers decide what "not found" means.
Unknown channel -> ActionError. There is nothing sensible to post to.
Unknown token   -> ActionError.
API failure while listing users/channels -> ActionError, cause chained.
"""
import logging
from typing import Protocol

from slack_sdk import WebClient
from slack_sdk.errors import SlackClientError

from slack_actions.config import SlackConfig
from slack_actions.errors import ActionError
from slack_actions.models import ClientSession

logger = logging.getLogger(__name__)

# Slack's recommended upper bound for cursor-paginated listings.
_PAGE_SIZE = 200


class PlatformFacade(Protocol):
    def get_slack_token(self, workspace_id: str) -> str: ...

    def get_user_id(self, workspace_id: str, name: str) -> str | None: ...

    def get_channel_id(self, workspace_id: str, channel: str) -> str: ...

    def get_client(self) -> WebClient: ...

    def create_session_from_channel(self, workspace_id: str, channel: str) -> ClientSession: ...


class SlackPlatform:
    """
    slack-sdk backed PlatformFacade.

    One WebClient is shared across workspaces; the workspace's token is
    passed on every call instead of being baked into the client.
    """

    def __init__(self, config: SlackConfig, client: WebClient | None = None):
        self._config = config
        self._client = client if client is not None else WebClient()
        self._user_ids: dict[str, dict[str, str]] = {}
        self._channel_ids: dict[str, dict[str, str]] = {}

    def get_client(self) -> WebClient:
        return self._client

    def get_slack_token(self, workspace_id: str) -> str:
        token = self._config.token_for(workspace_id)
        if not token:
            raise ActionError(
                f"No Slack token configured for workspace {workspace_id!r}. "
                f"Known workspaces: {sorted(self._config.tokens)}"
            )
        return token

    def get_user_id(self, workspace_id: str, name: str) -> str | None:
        """Return the user ID matching an ID, handle, or real name — None if unknown."""
        return self._lookup(self._user_ids, self._load_users, workspace_id, name)

    def get_channel_id(self, workspace_id: str, channel: str) -> str:
        """
        Return the channel ID for a channel ID or name.

        Raises:
            ActionError — if no channel in the workspace matches
        """
        key = channel[1:] if channel.startswith("#") else channel
        channel_id = self._lookup(self._channel_ids, self._load_channels, workspace_id, key)
        if channel_id is None:
            raise ActionError(
                f"Cannot find the channel {channel!r} in the workspace {workspace_id!r}"
            )
        return channel_id

    def create_session_from_channel(self, workspace_id: str, channel: str) -> ClientSession:
        return ClientSession(workspace_id=workspace_id, channel=channel)

    def invalidate(self, workspace_id: str) -> None:
        """Drop cached users and channels for a workspace (e.g. after a member joins)."""
        self._user_ids.pop(workspace_id, None)
        self._channel_ids.pop(workspace_id, None)

    def _lookup(self, cache: dict, load, workspace_id: str, key: str) -> str | None:
        # A miss on a warm cache reloads once: the member or channel may be new.
        if workspace_id in cache:
            found = cache[workspace_id].get(key)
            if found is not None:
                return found
        cache[workspace_id] = load(workspace_id)
        return cache[workspace_id].get(key)

    def _load_users(self, workspace_id: str) -> dict[str, str]:
        ids = {}
        for member in self._paginate("users_list", "members", workspace_id):
            user_id = member.get("id")
            if not user_id:
                continue
            profile = member.get("profile") or {}
            # First match wins when two members share a name.
            for key in (user_id, member.get("name"), member.get("real_name"), profile.get("real_name")):
                if key:
                    ids.setdefault(key, user_id)
        logger.debug("Loaded %d users for workspace %s", len(ids), workspace_id)
        return ids

    def _load_channels(self, workspace_id: str) -> dict[str, str]:
        ids = {}
        for conversation in self._paginate(
            "conversations_list",
            "channels",
            workspace_id,
            types="public_channel,private_channel",
        ):
            channel_id = conversation.get("id")
            if not channel_id:
                continue
            ids.setdefault(channel_id, channel_id)
            if conversation.get("name"):
                ids.setdefault(conversation["name"], channel_id)
        logger.debug("Loaded %d channel keys for workspace %s", len(ids), workspace_id)
        return ids

    def _paginate(self, method: str, items_key: str, workspace_id: str, **kwargs):
        token = self.get_slack_token(workspace_id)
        api = getattr(self._client, method)
        cursor = None
        while True:
            try:
                response = api(token=token, cursor=cursor, limit=_PAGE_SIZE, **kwargs)
            except (SlackClientError, OSError) as e:
                raise ActionError(
                    f"An error occurred when calling {method} for workspace {workspace_id!r}",
                    cause=e,
                ) from e
            yield from response.get(items_key) or []
            cursor = (response.get("response_metadata") or {}).get("next_cursor")
            if not cursor:
                return
