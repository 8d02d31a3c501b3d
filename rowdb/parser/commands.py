"""
Command Lexer - Splits a REPL input line into a command word and arguments

Input is split on spaces; empty tokens are dropped and the command word
is lower-cased. Arguments keep their case.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class ParsedCommand:
    """A command word plus its positional arguments"""
    name: str
    args: List[str] = field(default_factory=list)

    def rest(self, start: int = 0) -> str:
        """Arguments from start onward, joined back with single spaces"""
        return " ".join(self.args[start:])


def tokenize(line: str) -> List[str]:
    return [token.strip() for token in line.split(' ') if token.strip()]


def parse_command(line: str) -> Optional[ParsedCommand]:
    """Parse an input line, or return None for a blank line"""
    tokens = tokenize(line)
    if not tokens:
        return None
    return ParsedCommand(tokens[0].lower(), tokens[1:])


def split_row_values(args: List[str]) -> List[str]:
    """
    Values for an add-row command.

    "Alice, 30" style input (any comma present) is split on commas;
    otherwise every space-separated argument is one value.
    """
    joined = " ".join(args)
    if "," in joined:
        return [part.strip() for part in joined.split(",")]
    return list(args)
