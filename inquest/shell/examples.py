"""
Indentation cleanup for resource usage examples.
"""

from __future__ import annotations

import re


def dedent_example(example: str) -> str:
    """
    Remove the common indentation from a multi-line example.

    Only whitespace right after an embedded newline is removed; the text
    before the first newline is never touched, so it does not count towards
    the common indentation either. The width removed is the smallest leading
    whitespace among the remaining lines that have any content. Text with no
    such line is returned unchanged.

    Example:
        >>> dedent_example("\\n    file('/etc').exists\\n\\n      1\\n")
        "\\nfile('/etc').exists\\n\\n  1\\n"
    """
    widths = [
        len(line) - len(line.lstrip())
        for line in example.split("\n")[1:]
        if line.strip()
    ]
    if not widths or min(widths) == 0:
        return example

    return re.sub(r"\n[^\S\n]{%d}" % min(widths), "\n", example)
