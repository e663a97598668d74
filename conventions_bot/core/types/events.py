"""Event types for the conventions bot"""

from dataclasses import dataclass
from typing import Optional

@dataclass(frozen=True)
class InboundEvent:
    """A decoded issue-comment notification"""
    sender: str
    body: str
    owner: str
    repo: str
    issue_number: int
    action: Optional[str] = None
    delivery_id: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"

    def __str__(self) -> str:
        return f"{self.full_name}#{self.issue_number}"
