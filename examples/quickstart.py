"""
Slack actions quickstart — presence check and Block Kit post against a fake Slack.

THE SCENARIO:
A deploy bot wants to tell the on-call engineer that a release went out.
It first checks whether they are online, then posts a Block Kit summary
to #deploys.

WHAT EACH STEP SHOWS:

  1. IsOnline("alice")  → resolved to U001, presence "active" → True
  2. IsOnline("ghost")  → unknown user → False, warning logged, no error
  3. PostLayoutBlocksMessage(#deploys) → resolved to C002, posted with unfurling on
  4. get_client_session() → where the runtime should route the next turn

This example swaps the real WebClient for an in-memory fake so it runs
without a Slack workspace. To run against Slack, drop the fake and build the
platform from the environment:

    platform = SlackPlatform(SlackConfig.from_env())

Usage:
    python examples/quickstart.py
"""
import logging

from slack_actions import ActionRunner, IsOnline, PostLayoutBlocksMessage, SlackConfig, SlackPlatform


# ── A minimal fake WebClient (just enough to run) ─────────────────────────────

class FakeWebClient:
    """Answers the four Web API methods the actions and the platform use."""

    def __init__(self):
        self.posted: list[dict] = []

    def users_list(self, **kwargs):
        return {
            "ok": True,
            "members": [
                {"id": "U001", "name": "alice", "real_name": "Alice Smith"},
                {"id": "U002", "name": "bob", "real_name": "Bob Jones"},
            ],
        }

    def conversations_list(self, **kwargs):
        return {"ok": True, "channels": [{"id": "C001", "name": "general"}, {"id": "C002", "name": "deploys"}]}

    def users_getPresence(self, token, user):
        return {"ok": True, "presence": "active" if user == "U001" else "away"}

    def chat_postMessage(self, **kwargs):
        self.posted.append(kwargs)
        return {"ok": True, "channel": kwargs["channel"], "ts": "1700000000.000100"}


def main():
    logging.basicConfig(level=logging.INFO, format="  %(levelname)s %(name)s: %(message)s")

    client = FakeWebClient()
    platform = SlackPlatform(SlackConfig(tokens={"T0001": "xoxb-demo"}), client=client)
    runner = ActionRunner()

    print("\n1) Is alice online?")
    outcome = runner.run(IsOnline(platform, username="alice", workspace_id="T0001"))
    print(f"  kind={outcome.kind} value={outcome.value}")

    print("\n2) Is ghost online? (unknown user)")
    outcome = runner.run(IsOnline(platform, username="ghost", workspace_id="T0001"))
    print(f"  kind={outcome.kind} value={outcome.value}")

    print("\n3) Post the release summary to #deploys")
    blocks = [
        {"type": "header", "text": {"type": "plain_text", "text": "Release 2.4.0 is out"}},
        {"type": "divider"},
        {"type": "section", "text": {"type": "mrkdwn", "text": "<https://example.com/changelog|Changelog>"}},
    ]
    post = PostLayoutBlocksMessage(platform, blocks, channel="#deploys", workspace_id="T0001")
    outcome = runner.run(post)
    print(f"  kind={outcome.kind} detail={outcome.detail}")
    print(f"  unfurl_links={client.posted[0]['unfurl_links']} unfurl_media={client.posted[0]['unfurl_media']}")

    print("\n4) Route the next turn")
    print(f"  session={post.get_client_session().session_id}")


if __name__ == "__main__":
    main()
