"""Path dot-segment resolution."""

from __future__ import annotations


def remove_dot_segments(path: str) -> str:
    """Resolve ``.`` and ``..`` segments in *path*.

    Empty segments are dropped, so runs of slashes collapse. A ``..`` pops
    the previous segment when there is one to pop; at the top of the path it
    is kept literally. Segments are never reordered.

    Args:
        path: Raw URL path, e.g. ``"/a/./b/../c"``.

    Returns:
        The resolved path, e.g. ``"/a/c"``. An empty result is ``"/"`` when
        the source named a directory (trailing slash, or ending in a ``.`` or
        a collapsing ``..``), otherwise ``""``.
    """
    if not path:
        return ""

    stack: list[str] = []
    directory = False
    for segment in path.split("/"):
        if not segment:
            continue
        if segment == ".":
            directory = True
        elif segment == "..":
            if stack and stack[-1] != "..":
                stack.pop()
                directory = True
            else:
                stack.append(segment)
                directory = False
        else:
            stack.append(segment)
            directory = False
    directory = directory or path.endswith("/")

    if not stack:
        return "/" if directory else ""

    resolved = "/".join(stack)
    if path.startswith("/"):
        resolved = "/" + resolved
    if directory:
        resolved += "/"
    return resolved
