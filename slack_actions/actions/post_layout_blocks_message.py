"""
PostLayoutBlocksMessage — post a Block Kit message to a Slack channel.

The blocks are handed to chat.postMessage verbatim (dicts or slack_sdk Block
objects). Link and media unfurling are always on.

Failure policy
---------------
Empty/None channel or workspace_id -> ValueError at construction, before any API call.
Unknown channel                    -> whatever the platform raises (ActionError for SlackPlatform).
ok=false response                  -> rejected outcome, logged as an error, NOT raised.
                                      The conversation carries on. WebClient reports
                                      this as a SlackApiError over an HTTP 200 response.
SlackApiError (non-200) /
SlackClientError / OSError         -> ActionError (fatal), carrying the request.

compute() returns None on every non-raising path.
"""
import logging

from slack_sdk.errors import SlackApiError, SlackClientError

from slack_actions.actions.base import RuntimeArtifactAction, require_non_empty
from slack_actions.errors import ActionError
from slack_actions.models import ActionOutcome, ClientSession, PostMessageRequest
from slack_actions.platform import PlatformFacade


class PostLayoutBlocksMessage(RuntimeArtifactAction):
    """Post a list of layout blocks to a channel in a given workspace."""

    name = "post_layout_blocks_message"

    def __init__(
        self,
        platform: PlatformFacade,
        layout_blocks: list,
        channel: str,
        workspace_id: str,
        logger: logging.Logger | None = None,
    ):
        """
        Args:
            platform      — the facade used for channel resolution, tokens and the client
            layout_blocks — Block Kit blocks to post; may be empty, must not be None
            channel       — channel name ("general", "#general") or ID ("C123")
            workspace_id  — ID of the Slack workspace (team) containing the channel
            logger        — optional logger; defaults to this module's logger

        Raises:
            ValueError — if layout_blocks is None, or channel/workspace_id is None or empty
        """
        super().__init__(platform, logger)
        self.workspace_id = require_non_empty(self, "workspace", workspace_id)
        self.channel = require_non_empty(self, "channel", channel)
        if layout_blocks is None:
            raise ValueError(
                f"Cannot construct a {type(self).__name__} action without layout blocks"
            )
        self.layout_blocks = list(layout_blocks)

    def evaluate(self) -> ActionOutcome:
        request = PostMessageRequest(
            token=self.platform.get_slack_token(self.workspace_id),
            channel=self.platform.get_channel_id(self.workspace_id, self.channel),
            blocks=self.layout_blocks,
            unfurl_links=True,
            unfurl_media=True,
        )
        try:
            response = self.platform.get_client().chat_postMessage(**request.to_api_kwargs())
        except SlackApiError as e:
            if not _is_rejection(e.response):
                raise ActionError(
                    f"Cannot send the message {request} to the Slack API",
                    cause=e,
                    request=request,
                ) from e
            # WebClient raises on ok=false; Slack still answered the request.
            response = e.response
        except (SlackClientError, OSError) as e:
            raise ActionError(
                f"Cannot send the message {request} to the Slack API",
                cause=e,
                request=request,
            ) from e

        if response.get("ok"):
            self.logger.debug("Request %s successfully sent to the Slack API", request)
            return ActionOutcome(
                action=self.name,
                kind="ok",
                detail={"channel": response.get("channel"), "ts": response.get("ts")},
            )

        self.logger.error(
            "An error occurred when processing the request %s: received response %s",
            request,
            getattr(response, "data", response),
        )
        return ActionOutcome(
            action=self.name,
            kind="rejected",
            detail={"error": response.get("error")},
        )

    def compute(self) -> None:
        self.evaluate()
        return None

    def get_client_session(self) -> ClientSession:
        return self.platform.create_session_from_channel(self.workspace_id, self.channel)


def _is_rejection(response) -> bool:
    """True for an HTTP 200 answer carrying ok=false: Slack read the request and refused it."""
    return getattr(response, "status_code", None) == 200 and response.get("ok") is False
