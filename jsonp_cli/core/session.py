"""
Interactive session state.
"""

from dataclasses import dataclass, field

from ..ui.design_system import Theme, ThemeStore


@dataclass
class SessionState:
    """Mutable model/theme selection for one interactive run."""

    active_model: str
    themes: ThemeStore = field(default_factory=ThemeStore)

    @property
    def active_theme(self) -> str:
        return self.themes.name

    @property
    def theme(self) -> Theme:
        return self.themes.current
