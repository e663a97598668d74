"""
Core module for command matching and shared types.
"""
from conventions_bot.core.commands import Intent, CommandRule
from conventions_bot.core.types.events import InboundEvent

__all__ = ['Intent', 'CommandRule', 'InboundEvent']
