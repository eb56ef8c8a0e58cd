"""
IsOnline — is a given user online in a given Slack workspace?

The username can be a user ID (U123), a handle, or a real name; the platform
resolves it (see SlackPlatform.get_user_id).

Failure policy
---------------
Unknown user        -> not_found outcome, compute() returns False. Logged as a warning.
                       An unknown user is "not online", not an error.
SlackApiError       -> ActionError (fatal). Slack answered with an API-level error.
SlackClientError,
OSError             -> ActionError (fatal). Transport failure.

No retries: retry policy belongs to the runtime or to the WebClient's own
retry handlers.

Presence check is an exact match on "active". Slack currently reports only
"active" and "away"; anything else counts as offline.
"""
import logging

from slack_sdk.errors import SlackApiError, SlackClientError

from slack_actions.actions.base import RuntimeAction
from slack_actions.errors import ActionError
from slack_actions.models import ActionOutcome, PresenceRequest
from slack_actions.platform import PlatformFacade
from slack_actions.utils import log_slack_api_response

ONLINE_PRESENCE = "active"


class IsOnline(RuntimeAction):
    """Return whether a given user in a given workspace is online."""

    name = "is_online"

    def __init__(
        self,
        platform: PlatformFacade,
        username: str,
        workspace_id: str,
        logger: logging.Logger | None = None,
    ):
        """
        Args:
            platform     — the facade used for ID resolution, tokens and the client
            username     — user ID, handle, or real name of the user to check
            workspace_id — ID of the Slack workspace (team) the user belongs to
            logger       — optional logger; defaults to this module's logger
        """
        super().__init__(platform, logger)
        if username is None or workspace_id is None:
            raise ValueError(
                f"Cannot construct a {type(self).__name__} action with username={username!r}, "
                f"workspace_id={workspace_id!r}"
            )
        self.username = username
        self.workspace_id = workspace_id

    def evaluate(self) -> ActionOutcome:
        user_id = self.platform.get_user_id(self.workspace_id, self.username)
        if user_id is None:
            self.logger.warning(
                "%s: cannot find the user %s in the workspace %s, returning is_online=False",
                type(self).__name__,
                self.username,
                self.workspace_id,
            )
            return ActionOutcome(
                action=self.name,
                kind="not_found",
                value=False,
                detail={"username": self.username, "workspace_id": self.workspace_id},
            )

        request = PresenceRequest(
            token=self.platform.get_slack_token(self.workspace_id),
            user=user_id,
        )
        try:
            response = self.platform.get_client().users_getPresence(**request.to_api_kwargs())
        except (SlackClientError, OSError) as e:
            # SlackApiError is a SlackClientError, so both API and transport errors land here.
            if isinstance(e, SlackApiError):
                log_slack_api_response(e.response, self.logger)
            raise ActionError(
                "An error occurred when accessing the Slack API, see attached exception",
                cause=e,
                request=request,
            ) from e

        log_slack_api_response(response, self.logger)
        presence = response.get("presence")
        return ActionOutcome(
            action=self.name,
            kind="ok",
            value=presence == ONLINE_PRESENCE,
            detail={"user_id": user_id, "presence": presence},
        )

    def compute(self) -> bool:
        return self.evaluate().value
