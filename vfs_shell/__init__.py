"""vfs_shell package: POSIX-style file commands running against a sandboxed virtual file system.

This package exposes submodules directly; keep __all__ empty to avoid static checks
that expect module-level symbols.
"""

__all__: list[str] = []
