"""
ActionRunner — the smallest possible orchestrator seam.

The host runtime owns scheduling and conversation state; this class only
pins down the contract it relies on:

    runner = ActionRunner()
    outcome = runner.run(IsOnline(platform, username="alice", workspace_id="T1"))
    outcome.value  # -> True / False

Each action instance runs exactly once. Running the same instance twice is
a programming error (ValueError). ActionError from an action propagates
unchanged: the runner never converts a fatal failure into an outcome.

The runner does not keep actions alive: finished actions are tracked weakly.
Outcomes accumulate in history until clear_history().
"""
import logging
import weakref

from slack_actions.actions.base import RuntimeAction
from slack_actions.models import ActionOutcome

logger = logging.getLogger(__name__)


class ActionRunner:
    def __init__(self, log: logging.Logger | None = None):
        self._logger = log or logger
        self._ran: weakref.WeakSet = weakref.WeakSet()
        self.history: list[ActionOutcome] = []

    def run(self, action: RuntimeAction) -> ActionOutcome:
        """
        Evaluate one action and record its outcome.

        Raises:
            ValueError  — if this action instance has already been run
            ActionError — propagated from the action
        """
        if action in self._ran:
            raise ValueError(f"{type(action).__name__} action has already been run")
        self._ran.add(action)

        outcome = action.evaluate()
        self.history.append(outcome)
        if not outcome.succeeded:
            self._logger.info("%s finished with outcome %s", outcome.action, outcome.kind)
        return outcome

    def run_all(self, actions: list[RuntimeAction]) -> list[ActionOutcome]:
        """Run actions in order; the first ActionError stops the batch."""
        return [self.run(action) for action in actions]

    def clear_history(self) -> list[ActionOutcome]:
        """Drop recorded outcomes and return them."""
        history, self.history = self.history, []
        return history
