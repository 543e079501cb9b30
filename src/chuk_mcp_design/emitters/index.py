"""
Index manifest - one @import per emitted style sheet.

Imports follow emission order (primitives, semantic tokens, utility
classes; groups and categories in definition order) unless sorting is
requested.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import PurePosixPath


def emit_index(stylesheet_paths: Iterable[PurePosixPath | str], sort: bool = False) -> str:
    """
    Emit index.css content.

    Args:
        stylesheet_paths: Style-sheet paths relative to the output root
            (e.g. ``css/variables/groww-primary/colors.css``)
        sort: Sort imports instead of keeping emission order

    Returns:
        ``@import './css/...';`` lines, newline terminated
    """
    paths = [PurePosixPath(p).as_posix() for p in stylesheet_paths]
    if sort:
        paths.sort()
    return "".join(f"@import './{path}';\n" for path in paths)
