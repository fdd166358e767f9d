"""
Pure string translation between user tokens and archive entry paths.

Archive paths use '/' as separator and never start with it. The shell cursor
is either "" (root) or a directory path ending with '/'. Nothing here queries
the archive.
"""

SEPARATOR = "/"
ROOT = ""


def parent(path: str) -> str:
    """
    Return the parent directory of a directory path.

    The root ("" or "/") is its own parent. Non-root parents keep the
    trailing separator: ``parent("a/b/") == "a/"`` and ``parent("a/") == ""``.
    """
    if path in (ROOT, SEPARATOR):
        return path

    stripped = path[:-1] if path.endswith(SEPARATOR) else path
    index = stripped.rfind(SEPARATOR)
    if index <= 0:
        return ROOT
    return path[: index + 1]


def resolve_directory(cursor: str, token: str) -> str:
    """Join a token to the cursor as a directory path (trailing separator added)."""
    candidate = cursor + token
    if not candidate.endswith(SEPARATOR):
        candidate += SEPARATOR
    return candidate


def resolve_file(cursor: str, token: str) -> str:
    """Join a token to the cursor as a file path."""
    return cursor + token


def is_invalid_token(token: str) -> bool:
    """Tokens starting with '.' or '/' are rejected; dot segments are never normalised."""
    return token.startswith((".", SEPARATOR))


def display_path(path: str) -> str:
    """Render an archive path the way the shell shows it, rooted at '/'."""
    return SEPARATOR + path
