"""Conventions issues bot

Closes GitHub issues when the moderator comments /accept, /deny (/reject)
or /stale (/idle, /zzz).
"""

__version__ = "0.1.0"
