"""
ActionError — the single fatal exception kind raised by Slack actions.

Fail-soft conditions (unknown user, Slack answering ok=false) never reach
this module; they come back as ActionOutcome values. Everything raised as
ActionError means the action could not do its job: the Slack API was
unreachable, answered with an API-level error, or the platform could not
resolve something it must resolve (a token, a channel).

Always raise it `from` the original exception so the traceback keeps both:

    except SlackApiError as e:
        raise ActionError("Cannot send the message ...", cause=e, request=request) from e
"""


class ActionError(RuntimeError):
    """
    Fatal action failure.

    Attributes:
        cause   — the underlying exception, or None if the failure originated here
        request — the outbound request that failed, when there was one
    """

    def __init__(self, message: str, cause: BaseException | None = None, request=None):
        super().__init__(message)
        self.cause = cause
        self.request = request
