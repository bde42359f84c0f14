"""
Flag parsing shared by the shell commands.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence


@dataclass
class ParsedArgs:
    """Flags and positional operands split out of a raw argument list."""

    flags: set[str] = field(default_factory=set)
    positionals: list[str] = field(default_factory=list)
    ignored: set[str] = field(default_factory=set)

    def has(self, *flags: str) -> bool:
        return any(flag in self.flags for flag in flags)


def parse_flags(
    args: Sequence[str],
    known: str,
    logger: Optional[logging.Logger] = None,
) -> ParsedArgs:
    """
    Split ``args`` into single-character flags and positionals.

    Any token starting with '-' (other than a lone '-') is a cluster of flag
    characters. Characters outside ``known`` are recorded in ``ignored`` and
    otherwise dropped.

    Args:
        args: Raw arguments
        known: Accepted flag characters, e.g. "rR"
        logger: Logger used to report ignored flags

    Returns:
        ParsedArgs with flags, positionals and ignored characters
    """
    parsed = ParsedArgs()

    for arg in args:
        if arg.startswith("-") and arg != "-":
            for char in arg[1:]:
                if char in known:
                    parsed.flags.add(char)
                else:
                    parsed.ignored.add(char)
        else:
            parsed.positionals.append(arg)

    if parsed.ignored and logger is not None:
        logger.debug(f"Ignoring unknown flags: {''.join(sorted(parsed.ignored))}")

    return parsed
