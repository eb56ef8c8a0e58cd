"""
Action base classes.

Every action is a single-use command object: the runtime constructs it with
its parameters, calls compute() once, and throws it away.

    evaluate()            -> ActionOutcome   (kind says ok / not_found / rejected)
    compute()             -> evaluate().value, the plain value the runtime stores
    get_client_session()  -> ClientSession | None, where follow-up turns should go

Fatal failures are raised as ActionError from evaluate(); they are never
folded into an ActionOutcome.

Logging is a side channel: each action gets a logger (injected, or the
module logger of the concrete action) and calls it at fixed points. The
control-flow decision never depends on it.
"""
import logging
from abc import ABC, abstractmethod

from slack_actions.models import ActionOutcome, ClientSession
from slack_actions.platform import PlatformFacade


class RuntimeAction(ABC):
    """An action executed against a Slack platform facade."""

    # Used in log lines and ActionOutcome.action.
    name: str = "runtime_action"

    def __init__(self, platform: PlatformFacade, logger: logging.Logger | None = None):
        if platform is None:
            raise ValueError(f"Cannot construct a {type(self).__name__} action without a platform")
        self.platform = platform
        self.logger = logger or logging.getLogger(type(self).__module__)

    @abstractmethod
    def evaluate(self) -> ActionOutcome:
        ...

    def compute(self):
        return self.evaluate().value

    def get_client_session(self) -> ClientSession | None:
        return None


class RuntimeArtifactAction(RuntimeAction):
    """An action that leaves something behind in a channel (a message, a file)."""

    @abstractmethod
    def get_client_session(self) -> ClientSession:
        ...


def require_non_empty(action: RuntimeAction, label: str, value: str | None) -> str:
    """Return value, or raise ValueError naming the action and the bad argument."""
    if value is None or value == "":
        raise ValueError(
            f"Cannot construct a {type(action).__name__} action with the provided {label} "
            f"{value!r}, expected a non-null and not empty string"
        )
    return value
