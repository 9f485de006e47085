"""
Diff Generator Service - Render line diffs for edit previews and confirmations
"""

from __future__ import annotations

from difflib import unified_diff

from models.diff import DiffResult

NO_NEWLINE_MARKER = "\\ No newline at end of file\n"


def diff_lines(text: str) -> list[str]:
    """Lines with "\\n" kept; CRLF is compared as LF, a lone "\\r" stays content"""
    pieces = text.replace("\r\n", "\n").split("\n")
    lines = [piece + "\n" for piece in pieces[:-1]]
    if pieces[-1]:
        lines.append(pieces[-1])
    return lines


class DiffGenerator:
    """Generate unified diffs between two versions of a file"""

    def __init__(self, context_lines: int = 3):
        self.context_lines = context_lines

    def generate_diff(
        self,
        original_content: str,
        new_content: str,
        file_path: str,
    ) -> DiffResult:
        """Generate structured diff from original and new content"""
        original_lines = diff_lines(original_content)
        new_lines = diff_lines(new_content)

        unified = []
        for line in unified_diff(
            original_lines,
            new_lines,
            fromfile=f"a/{file_path}",
            tofile=f"b/{file_path}",
            n=self.context_lines,
        ):
            # A last line without newline gets diff's marker instead of gluing onto the next
            if line.endswith("\n"):
                unified.append(line)
            else:
                unified.append(line + "\n" + NO_NEWLINE_MARKER)

        return DiffResult(
            file_path=file_path,
            unified_diff="".join(unified),
            preview_content=new_content,
        )

    def render(self, original_content: str, new_content: str, file_path: str) -> str:
        """Render the diff as a fenced ```diff block for tool responses"""
        return self.fence(self.generate_diff(original_content, new_content, file_path).unified_diff)

    @staticmethod
    def fence(diff_text: str) -> str:
        """Wrap diff text in a code fence longer than any backtick run inside it"""
        ticks = 3
        while "`" * ticks in diff_text:
            ticks += 1
        fence = "`" * ticks
        return f"{fence}diff\n{diff_text}{fence}\n\n"
