"""
Model access for JSONP-CLI.
"""

from .prompt_generator import INSTRUCTION_TEMPLATE, PromptGenerator

__all__ = ["INSTRUCTION_TEMPLATE", "PromptGenerator"]
