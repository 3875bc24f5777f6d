"""
Command handlers for JSONP-CLI.
"""

from .interactive import InteractiveSession, LoopState
from .slash_commands import SlashCommandHandler

__all__ = ["InteractiveSession", "LoopState", "SlashCommandHandler"]
