"""Shared helpers for Slack actions."""
import logging

logger = logging.getLogger(__name__)


def log_slack_api_response(response, log: logging.Logger | None = None) -> None:
    """
    Log a raw Slack Web API response at DEBUG level.

    Accepts a slack_sdk SlackResponse or a plain dict (tests hand in dicts).
    Only the response body is logged, never the request headers, so bot
    tokens do not end up in the logs.
    """
    log = log or logger
    data = getattr(response, "data", response)
    log.debug("Slack API response: %s", data)
