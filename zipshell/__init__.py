"""zipshell package: a read-only interactive shell over the contents of a ZIP archive.

This package exposes submodules directly; keep __all__ empty to avoid static checks
that expect module-level symbols.
"""

__all__: list[str] = []
