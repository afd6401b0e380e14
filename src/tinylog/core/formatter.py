from __future__ import annotations

"""
Message Formatter.

Expands `%` placeholders in a template against an ordered argument list.
The language is deliberately lenient: the character following `%` is a
position marker only and is discarded, so `%d`, `%s` and `%x` all mean
"next argument". `%%` is an escaped literal percent sign.
"""

from typing import Any, List, Sequence

from tinylog.domain.errors import FormatUnderflow

PLACEHOLDER = "%"


def count_placeholders(template: str) -> int:
    """Return the number of argument-consuming placeholders in `template`."""
    count = 0
    i = 0
    n = len(template)
    while i < n:
        if template[i] == PLACEHOLDER:
            if i + 1 < n and template[i + 1] == PLACEHOLDER:
                i += 2
                continue
            count += 1
            i += 2
            continue
        i += 1
    return count


def expand(template: str, args: Sequence[Any], *, strict: bool = False) -> str:
    """
    Expand a template against positional arguments.

    Surplus arguments are dropped. When placeholders outnumber arguments,
    output stops at the first unmatched placeholder unless `strict` is set.

    Args:
        template: Template text containing `%` placeholders.
        args: Values substituted in order through `str()`.
        strict: Raise instead of truncating on missing arguments.

    Returns:
        str: The expanded body, without a line terminator.

    Raises:
        FormatUnderflow: In strict mode, if an argument is missing.
    """
    out: List[str] = []
    consumed = 0
    i = 0
    n = len(template)

    while i < n:
        ch = template[i]
        if ch != PLACEHOLDER:
            out.append(ch)
            i += 1
            continue

        if i + 1 < n and template[i + 1] == PLACEHOLDER:
            out.append(PLACEHOLDER)
            i += 2
            continue

        if consumed >= len(args):
            if strict:
                raise FormatUnderflow(template, count_placeholders(template), len(args))
            break

        out.append(str(args[consumed]))
        consumed += 1
        i += 2

    return "".join(out)


def format_message(template: str, args: Sequence[Any]) -> str:
    """
    Build a log line body.

    A call without arguments emits the template verbatim, with no `%`
    processing at all; otherwise the template is expanded.
    """
    if not args:
        return template
    return expand(template, args)
