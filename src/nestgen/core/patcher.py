"""
Registration of generated modules in the root ``app.module.ts``.

The aggregator is edited with two targeted text insertions instead of being
parsed: an import statement is prepended to the file, and the module class
is appended to the first ``imports: [...]`` list. The file is expected to
hold a single such list, the conventional shape of a Nest root module. The
end of the list is found with one forward scan that counts nested brackets
and steps over string literals and comments.
"""

from __future__ import annotations

from enum import Enum
import logging
from pathlib import Path
import re
import shutil

from nestgen.core.names import NameSet

logger = logging.getLogger(__name__)

_IMPORTS_OPEN = re.compile(r"\bimports\s*:\s*\[")
_QUOTES = "'\"`"


class PatchOutcome(str, Enum):
    """Result of registering a module in the aggregator."""

    SKIPPED = "skipped"
    ALREADY_PRESENT = "already-present"
    INSERTED = "inserted"
    LIST_NOT_FOUND = "list-not-found"


def import_line(names: NameSet) -> str:
    return f"import {{ {names.module_class} }} from './{names.kebab}/{names.kebab}.module';"


def _has_line(content: str, line: str) -> bool:
    return any(existing.strip() == line for existing in content.splitlines())


def _newline(content: str) -> str:
    return "\r\n" if "\r\n" in content else "\n"


def _indent_at(content: str, pos: int) -> str:
    """Leading whitespace of the line containing ``pos``."""
    line_start = content.rfind("\n", 0, pos) + 1
    line = content[line_start:pos]
    return line[: len(line) - len(line.lstrip())]


def _find_imports_list(content: str) -> tuple[int, int, int] | None:
    """
    Locate the first ``imports: [...]`` list.

    Returns:
        ``(marker_start, body_start, body_end)`` where ``body_end`` is the
        index of the matching ``]``, or None when there is no list or its
        brackets never balance.
    """
    opening = _IMPORTS_OPEN.search(content)
    if opening is None:
        return None

    depth = 1
    quote: str | None = None
    i = opening.end()
    while i < len(content):
        ch = content[i]
        if quote is not None:
            if ch == "\\":
                i += 1
            elif ch == quote:
                quote = None
        elif ch in _QUOTES:
            quote = ch
        elif content.startswith("//", i):
            i = content.find("\n", i)
            if i == -1:
                return None
        elif content.startswith("/*", i):
            i = content.find("*/", i + 2)
            if i == -1:
                return None
            i += 1
        elif ch == "[":
            depth += 1
        elif ch == "]":
            depth -= 1
            if depth == 0:
                return opening.start(), opening.end(), i
        i += 1

    return None


def _comment_start(line: str) -> int:
    """Index of a trailing ``//`` comment in ``line``, or ``len(line)``."""
    quote: str | None = None
    i = 0
    while i < len(line):
        ch = line[i]
        if quote is not None:
            if ch == "\\":
                i += 1
            elif ch == quote:
                quote = None
        elif ch in _QUOTES:
            quote = ch
        elif line.startswith("//", i):
            return i
        i += 1
    return len(line)


def _with_separator(head: str) -> str:
    """Put a comma after the last entry of ``head``, ahead of any line comment."""
    if not head:
        return head

    line_start = head.rfind("\n") + 1
    line = head[line_start:]
    code = line[: _comment_start(line)].rstrip()
    if not code.strip():
        # comment-only line: the last entry sits further up
        earlier = head[:line_start].rstrip()
        return _with_separator(earlier) + head[len(earlier) :]
    if code.endswith(","):
        return head

    pos = line_start + len(code)
    return f"{head[:pos]},{head[pos:]}"


def _append_entry(content: str, marker_start: int, body: str, entry: str) -> str:
    """Return ``body`` with ``entry`` appended as the last list element."""
    head = body.rstrip()
    tail = body[len(head) :]
    newline = _newline(content)
    base_indent = _indent_at(content, marker_start)

    if "\n" in head:
        last = head.rsplit("\n", 1)[1]
        indent = last[: len(last) - len(last.lstrip())]
    else:
        indent = base_indent + "  "

    if "\n" not in tail:
        # closing bracket shared a line with the entries
        tail = newline + base_indent

    return f"{_with_separator(head)}{newline}{indent}{entry},{tail}"


def register_module(content: str, names: NameSet) -> tuple[str, PatchOutcome]:
    """
    Add the import statement and the list entry of ``names`` to ``content``.

    Both insertions are idempotent: applying the function to its own output
    returns the output unchanged. Everything outside the two insertion points
    is preserved as is.

    Returns:
        The patched text and the outcome. ``LIST_NOT_FOUND`` is reported when
        no complete ``imports: [...]`` list exists; the import line is still
        added.
    """
    changed = False

    line = import_line(names)
    if _has_line(content, line):
        logger.debug("Import for %s already present", names.module_class)
    else:
        content = f"{line}{_newline(content)}{content}"
        changed = True

    found = _find_imports_list(content)
    if found is None:
        logger.debug("No imports list found")
        return content, PatchOutcome.LIST_NOT_FOUND

    marker_start, body_start, body_end = found
    body = content[body_start:body_end]
    if re.search(rf"\b{re.escape(names.module_class)}\b", body):
        logger.debug("%s already listed in imports", names.module_class)
    else:
        body = _append_entry(content, marker_start, body, names.module_class)
        content = content[:body_start] + body + content[body_end:]
        changed = True

    return content, PatchOutcome.INSERTED if changed else PatchOutcome.ALREADY_PRESENT


def patch(aggregator_path: Path, names: NameSet) -> PatchOutcome:
    """
    Register ``names`` in the aggregator file at ``aggregator_path``.

    A missing aggregator is not an error: ``SKIPPED`` is returned and nothing
    is touched. The file is only rewritten when its content changes, through a
    sibling temporary file that takes over the original's permission bits and
    then replaces it.

    Raises:
        OSError: If the aggregator cannot be read or written.
    """
    if not aggregator_path.exists():
        logger.debug("Aggregator %s not found, skipping registration", aggregator_path)
        return PatchOutcome.SKIPPED

    with aggregator_path.open(encoding="utf-8", newline="") as f:
        original = f.read()

    content, outcome = register_module(original, names)

    if content != original:
        tmp_path = aggregator_path.with_name(f".{aggregator_path.name}.tmp")
        try:
            with tmp_path.open("w", encoding="utf-8", newline="") as f:
                f.write(content)
            shutil.copymode(aggregator_path, tmp_path)
            tmp_path.replace(aggregator_path)
        except OSError:
            tmp_path.unlink(missing_ok=True)
            raise
        logger.debug("Wrote %s", aggregator_path)

    return outcome
