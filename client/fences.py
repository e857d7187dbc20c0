"""
Fenced code block lexer for markdown reviews.

Scans a review line by line and yields the fenced code blocks it contains, in
document order:

- an opening fence is a line with any leading indentation, a run of three or
  more backticks and an optional info string (the first word is the language
  tag). The info string may not contain backticks. The opener's indentation
  is removed from the block's lines, so fences nested in list items come out
  flush left.
- a closing fence is either a line of indentation plus a run of backticks at
  least as long as the opening run, followed only by whitespace, or such a
  run at the end of a content line (``foo()```), which ends the block after
  that content. Shorter backtick runs inside a block are content.
- a fence still open at the end of the text is unterminated and produces no
  block.
"""

import re
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

OPEN_FENCE = re.compile(r"^(?P<indent>[ \t]*)(?P<ticks>`{3,})(?P<info>[^`]*)$")
CLOSE_FENCE = re.compile(r"^[ \t]*(?P<ticks>`{3,})[ \t]*$")
TRAILING_FENCE = re.compile(r"^(?P<body>.*[^`])(?P<ticks>`{3,})[ \t]*$")

BLOCK_SEPARATOR = "\n\n"


@dataclass
class CodeBlock:
    """One fenced block: raw inner text plus where it started."""

    content: str
    language: Optional[str] = None
    line: int = 1

    @property
    def code(self) -> str:
        """Inner text with leading and trailing whitespace removed."""
        return self.content.strip()


@dataclass
class LexResult:
    blocks: List[CodeBlock] = field(default_factory=list)
    unterminated: Optional[CodeBlock] = None


def _dedent(line: str, width: int) -> str:
    if not width:
        return line
    return re.sub(r"^[ \t]{0,%d}" % width, "", line, count=1)


class FenceLexer:
    """Single pass, line oriented scanner over fence delimiters."""

    def __init__(self, text: str):
        self.text = text or ""

    def tokenize(self) -> LexResult:
        result = LexResult()

        open_ticks = 0
        indent = 0
        language: Optional[str] = None
        start_line = 0
        body: List[str] = []

        def close() -> None:
            result.blocks.append(
                CodeBlock(content="".join(body), language=language, line=start_line)
            )

        for number, raw in enumerate(self.text.splitlines(keepends=True), start=1):
            line = raw.rstrip("\r\n")

            if not open_ticks:
                match = OPEN_FENCE.match(line)
                if match:
                    open_ticks = len(match.group("ticks"))
                    indent = len(match.group("indent"))
                    info = match.group("info").strip()
                    language = info.split()[0] if info else None
                    start_line = number
                    body = []
                continue

            match = CLOSE_FENCE.match(line)
            if match and len(match.group("ticks")) >= open_ticks:
                close()
                open_ticks = 0
                continue

            match = TRAILING_FENCE.match(line)
            if match and len(match.group("ticks")) >= open_ticks:
                body.append(_dedent(match.group("body"), indent))
                close()
                open_ticks = 0
                continue

            body.append(_dedent(raw, indent))

        if open_ticks:
            result.unterminated = CodeBlock(
                content="".join(body), language=language, line=start_line
            )

        return result

    def __iter__(self) -> Iterator[CodeBlock]:
        return iter(self.tokenize().blocks)


def extract_code_blocks(text: str) -> List[str]:
    """Trimmed contents of every complete fenced block, in order."""
    return [block.code for block in FenceLexer(text)]


def join_code_blocks(blocks: List[str]) -> str:
    return BLOCK_SEPARATOR.join(blocks)
