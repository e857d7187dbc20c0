"""
Rich renderables for the review pane.
"""

from typing import Optional

from rich.console import RenderableType
from rich.markdown import Markdown
from rich.panel import Panel
from rich.syntax import Syntax
from rich.text import Text

from client.session import Level, Notification

PLACEHOLDER = "No review yet. Submit code to get AI feedback."

LEVEL_STYLES = {
    Level.SUCCESS: ("green", "✅"),
    Level.WARNING: ("yellow", "⚠️"),
    Level.ERROR: ("bold red", "❌"),
}


def render_review(review: Optional[str], code_theme: str = "monokai") -> Panel:
    """Markdown review with highlighted fences, or the empty placeholder."""
    body: RenderableType
    if review:
        body = Markdown(review, code_theme=code_theme)
        border = "green"
    else:
        body = Text(PLACEHOLDER, style="dim")
        border = "grey50"
    return Panel(body, title="🤖 AI Review", border_style=border)


def render_code(code: str, code_theme: str = "monokai") -> Panel:
    if not code:
        body: RenderableType = Text("Write your code here...", style="dim")
    else:
        body = Syntax(code, "javascript", theme=code_theme, line_numbers=True)
    return Panel(body, title="✍️ Write Your Code", border_style="blue")


def render_notification(notification: Notification) -> Text:
    style, icon = LEVEL_STYLES[notification.level]
    return Text(f"{icon} {notification.message}", style=style)
