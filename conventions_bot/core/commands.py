"""Moderator command vocabulary and closing-message templates.

A comment triggers at most one intent. Rules are checked in order and the
first one with a trigger substring present in the comment wins, so a comment
containing both ``/deny`` and ``/accept`` is treated as a denial. Matching is
case-sensitive and does not care where in the comment the trigger appears.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple

DEFAULT_CONVENTIONS_URL = (
    "https://github.com/hanabi/hanabi.github.io/blob/main/misc/convention-changes.md"
)

CONSENSUS_LINE = (
    "Some time has passed since this issue was opened and the group appears "
    "to have reached a consensus."
)

CLOSING_LINE = (
    "This issue will now be closed. If you feel this was an error, feel free "
    "to continue the discussion and a moderator will re-open the issue."
)

FOOTER_TEMPLATE = (
    "(For more information on how consensus is determined, please read the "
    "[Convention Changes document]({url}).)"
)


class Intent(str, Enum):
    """Recognized moderator commands"""
    DENY = "deny"
    ACCEPT = "accept"
    STALE = "stale"


@dataclass(frozen=True)
class CommandRule:
    """Trigger substrings and message lines for one intent"""
    intent: Intent
    triggers: Tuple[str, ...]
    lines: Tuple[str, ...]

    def matches(self, text: str) -> bool:
        return any(trigger in text for trigger in self.triggers)


DENY_RULE = CommandRule(
    intent=Intent.DENY,
    triggers=("/deny", "/reject"),
    lines=(
        CONSENSUS_LINE,
        "❌ This change will **not** be integrated into the official "
        "reference document.",
    ),
)

ACCEPT_RULE = CommandRule(
    intent=Intent.ACCEPT,
    triggers=("/accept",),
    lines=(
        CONSENSUS_LINE,
        "✔️ This change will be integrated into the official "
        "reference document.",
    ),
)

STALE_RULE = CommandRule(
    intent=Intent.STALE,
    triggers=("/stale", "/idle", "/zzz"),
    lines=(
        "Some time has passed since this issue was opened and the discussion "
        "appears to have died down.",
        "\U0001f4a4 Either the document has already been updated or no "
        "additional changes need to be made.",
    ),
)


def build_vocabulary(enable_stale: bool = True) -> Tuple[CommandRule, ...]:
    """Return the rules in priority order"""
    rules = (DENY_RULE, ACCEPT_RULE)
    if enable_stale:
        rules += (STALE_RULE,)
    return rules


def match_rule(text: Optional[str], rules: Sequence[CommandRule]) -> Optional[CommandRule]:
    """Return the first rule triggered by ``text``, or None"""
    if not text:
        return None
    for rule in rules:
        if rule.matches(text):
            return rule
    return None


def compose_message(rule: CommandRule, conventions_url: str = DEFAULT_CONVENTIONS_URL) -> str:
    """Render the closing comment for a matched rule"""
    bullets = [f"* {line}" for line in rule.lines + (CLOSING_LINE,)]
    return "\n".join(bullets) + "\n\n" + FOOTER_TEMPLATE.format(url=conventions_url)
