"""Slack runtime actions — presence checks and Block Kit posts for conversational agents."""

from slack_actions.actions.is_online import IsOnline
from slack_actions.actions.post_layout_blocks_message import PostLayoutBlocksMessage
from slack_actions.config import SlackConfig
from slack_actions.errors import ActionError
from slack_actions.models import ActionOutcome, ClientSession
from slack_actions.platform import SlackPlatform
from slack_actions.runner import ActionRunner

__all__ = [
    "IsOnline",
    "PostLayoutBlocksMessage",
    "SlackConfig",
    "SlackPlatform",
    "ActionError",
    "ActionOutcome",
    "ClientSession",
    "ActionRunner",
]
