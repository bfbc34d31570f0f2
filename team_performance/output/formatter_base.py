"""Console rendering of dashboard and member detail views."""

# ANSI color codes
GREEN = '\033[92m'
YELLOW = '\033[93m'
RED = '\033[91m'
CYAN = '\033[96m'
BOLD = '\033[1m'
RESET = '\033[0m'


class ConsoleRenderer:
    """Prints the views of the team performance dashboard."""

    def __init__(self, language: str = 'english', use_color: bool = True):
        """Initialize the renderer.

        Args:
            language: Language for empty-state and status messages
            use_color: Whether to emit ANSI color codes
        """
        self.language = language
        self.use_color = use_color

    def _color(self, text: str, color: str) -> str:
        if not self.use_color:
            return text
        return f"{color}{text}{RESET}"


# Import and attach methods from submodules
from .message_templates import _get_message_templates, _message
from .console import (render, render_dashboard, render_member_detail, render_error,
                      _render_podium, _render_rankings, _render_tabs, _render_tab_table,
                      _render_pager)

ConsoleRenderer._get_message_templates = _get_message_templates
ConsoleRenderer._message = _message
ConsoleRenderer.render = render
ConsoleRenderer.render_dashboard = render_dashboard
ConsoleRenderer.render_member_detail = render_member_detail
ConsoleRenderer.render_error = render_error
ConsoleRenderer._render_podium = _render_podium
ConsoleRenderer._render_rankings = _render_rankings
ConsoleRenderer._render_tabs = _render_tabs
ConsoleRenderer._render_tab_table = _render_tab_table
ConsoleRenderer._render_pager = _render_pager
