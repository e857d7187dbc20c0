"""
Terminal front end for the code review gateway.

Left pane: the code being written. Right pane: the rendered review.
Commands: (e)dit code, (r)eview, copy (a)ll, copy (c)ode, (q)uit.
"""

import asyncio
import logging
from pathlib import Path
from typing import List, Optional

import click
from rich.columns import Columns
from rich.console import Console
from rich.prompt import Prompt

from client.clipboard import Clipboard, SystemClipboard
from client.config import get_client_settings
from client.gateway import GatewayClient
from client.render import render_code, render_notification, render_review
from client.session import Notification, ReviewService, ReviewSession

END_OF_INPUT = "."

COMMANDS = {
    "e": "edit code",
    "r": "review",
    "a": "copy all",
    "c": "copy code",
    "q": "quit",
}


class ReviewApp:
    """Interactive loop driving a ReviewSession from the terminal."""

    def __init__(
        self,
        service: ReviewService,
        clipboard: Clipboard,
        console: Optional[Console] = None,
        code_theme: str = "monokai",
    ):
        self.console = console or Console()
        self.code_theme = code_theme
        self.session = ReviewSession(service, clipboard, notify=self.notify)

    def notify(self, notification: Notification) -> None:
        self.console.print(render_notification(notification))

    def draw(self) -> None:
        self.console.print(
            Columns(
                [
                    render_code(self.session.code, self.code_theme),
                    render_review(self.session.review, self.code_theme),
                ],
                equal=True,
                expand=True,
            )
        )

    def read_code(self) -> str:
        """Read lines until a lone '.' or EOF."""
        self.console.print(
            f"[dim]Paste your code. Finish with a line containing only '{END_OF_INPUT}'.[/dim]"
        )
        lines: List[str] = []
        while True:
            try:
                line = self.console.input()
            except EOFError:
                break
            if line == END_OF_INPUT:
                break
            lines.append(line)
        return "\n".join(lines)

    def submit(self) -> None:
        with self.console.status("⏳ Reviewing..."):
            asyncio.run(self.session.submit())

    def handle(self, command: str) -> bool:
        """Run one command. Returns False when the app should exit."""
        if command == "q":
            return False
        if command == "e":
            self.session.code = self.read_code()
        elif command == "r":
            self.submit()
        elif command == "a":
            self.session.copy_all()
        elif command == "c":
            self.session.copy_code()
        self.draw()
        return True

    def run(self) -> None:
        self.draw()
        while True:
            label = "🔍 " + self.session.submit_label
            hint = ", ".join(f"{k}={v}" for k, v in COMMANDS.items())
            command = Prompt.ask(
                f"[bold]{label}[/bold] [dim]({hint})[/dim]",
                choices=list(COMMANDS),
                default="r" if self.session.can_submit else "e",
                console=self.console,
            )
            if not self.handle(command):
                break


@click.command()
@click.option("--base-url", default=None, help="Gateway root URL (default: REVIEW_BASE_URL)")
@click.option(
    "--file",
    "code_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Preload code from a file",
)
@click.option("--theme", default=None, help="Pygments theme for code blocks")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
def main(base_url: Optional[str], code_file: Optional[Path], theme: Optional[str], verbose: bool) -> None:
    """AI code review in the terminal."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    settings = get_client_settings()
    gateway = GatewayClient(base_url or settings.REVIEW_BASE_URL, timeout=settings.REVIEW_TIMEOUT)

    console = Console()
    app = ReviewApp(
        gateway,
        SystemClipboard(),
        console=console,
        code_theme=theme or settings.REVIEW_CODE_THEME,
    )

    if code_file:
        app.session.code = code_file.read_text(encoding="utf-8")

    app.run()


if __name__ == "__main__":
    main()
