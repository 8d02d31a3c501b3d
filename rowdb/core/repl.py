"""
REPL - Interactive shell for RowDB

Provides a command-line interface for creating, editing, viewing and
saving tables. Each input line is one command; errors are printed and
the loop keeps going.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from .. import SOFTWARE_NAME, __version__
from ..parser.commands import ParsedCommand, parse_command, split_row_values
from .manager import CommandResult, DatabaseManager


logger = logging.getLogger(__name__)

DATA_DIR_ENV = "ROWDB_DATA_DIR"


class REPL:
    """
    Interactive REPL (Read-Eval-Print Loop) for RowDB.

    Features:
    - One command per line, flag-style command words (-c, --create, ...)
    - Prompt shows the current table
    - Errors are reported and the loop continues
    """

    BANNER = f"""{SOFTWARE_NAME} {__version__}
Type 'help' for commands or 'exit' to quit."""

    HELP = f"""{SOFTWARE_NAME} - Personal Data Table Manager
Usage:
  {SOFTWARE_NAME} [options]
Commands:
  -c, --create <table> [columns...]  Create a new table
  -e, --edit <cellRef> <value>       Edit a cell (e.g., A5)
  -a, --add <values...>              Append a row (space or comma separated)
  -v, --view                         View current table
  -s, --select <table>               Select a table
  -l, --load <file>                  Load a table from file
  -sv, --save <file>                 Save current table to file
  -d, --drop <table>                 Remove a table from memory
  --list                             List all loaded tables
  help                               Show this help message
  version                            Show version information
  exit, quit                         Leave the shell

Supported Formats:
  .odt - Open Data Table (unencrypted)
"""

    def __init__(self, data_dir: Optional[str] = None, manager: Optional[DatabaseManager] = None):
        """Initialize REPL with a table manager."""
        self.manager = manager or DatabaseManager(data_dir)
        self.running = False

        self._commands = {
            '-c': self._create, '--create': self._create,
            '-e': self._edit, '--edit': self._edit,
            '-a': self._add, '--add': self._add,
            '-v': self._view, '--view': self._view,
            '-s': self._select, '--select': self._select,
            '-l': self._load, '--load': self._load,
            '-sv': self._save, '--save': self._save,
            '-d': self._drop, '--drop': self._drop,
            '--list': self._list,
            'help': self._help,
            'version': self._version,
            'exit': self._quit, 'quit': self._quit,
        }

    def run(self) -> None:
        """Start the REPL loop."""
        self.running = True
        print(self.BANNER)

        while self.running:
            try:
                self._process_input()
            except KeyboardInterrupt:
                print("\n(Use exit to quit)")
            except EOFError:
                print()
                self.print_result(self._quit(ParsedCommand('exit')))

    def _get_prompt(self) -> str:
        if self.manager.has_current_table():
            return f"{SOFTWARE_NAME}/{self.manager.current_table_name} >> "
        return f"{SOFTWARE_NAME} >> "

    def _process_input(self) -> None:
        line = input(self._get_prompt())
        result = self.execute_line(line)
        if result is not None:
            self.print_result(result)

    def execute_line(self, line: str) -> Optional[CommandResult]:
        """
        Run one command line.

        Returns:
            The command's result, or None for a blank line
        """
        command = parse_command(line)
        if command is None:
            return None

        handler = self._commands.get(command.name)
        if handler is None:
            return CommandResult(
                ok=False,
                message=f"Unknown command: {command.name}\nType 'help' for available commands.",
            )
        logger.debug("Dispatching %s %s", command.name, command.args)
        return handler(command)

    def print_result(self, result: CommandResult) -> None:
        if not result.ok:
            print(f"Error: {result.message}")
            return
        if result.message:
            print(result.message)
        if result.output:
            print(result.output)

    # -- handlers ----------------------------------------------------------

    @staticmethod
    def _usage(message: str) -> CommandResult:
        return CommandResult(ok=False, message=message)

    def _create(self, cmd: ParsedCommand) -> CommandResult:
        if len(cmd.args) < 2:
            return self._usage("Table name and at least one column required.")
        return self.manager.create(cmd.args[0], cmd.args[1:])

    def _edit(self, cmd: ParsedCommand) -> CommandResult:
        if len(cmd.args) < 2:
            return self._usage("Cell reference and value required.")
        return self.manager.edit(cmd.args[0], cmd.rest(1))

    def _add(self, cmd: ParsedCommand) -> CommandResult:
        if not cmd.args:
            return self._usage("At least one value required.")
        return self.manager.add_row(split_row_values(cmd.args))

    def _view(self, cmd: ParsedCommand) -> CommandResult:
        return self.manager.view()

    def _select(self, cmd: ParsedCommand) -> CommandResult:
        if not cmd.args:
            return self._usage("Table name required.")
        return self.manager.select(cmd.args[0])

    def _load(self, cmd: ParsedCommand) -> CommandResult:
        if not cmd.args:
            return self._usage("Filename required.")
        return self.manager.load(cmd.args[0])

    def _save(self, cmd: ParsedCommand) -> CommandResult:
        if not cmd.args:
            return self._usage("Filename required.")
        return self.manager.save(cmd.args[0])

    def _drop(self, cmd: ParsedCommand) -> CommandResult:
        if not cmd.args:
            return self._usage("Table name required.")
        return self.manager.drop(cmd.args[0])

    def _list(self, cmd: ParsedCommand) -> CommandResult:
        return self.manager.show_tables()

    def _help(self, cmd: ParsedCommand) -> CommandResult:
        return CommandResult.success(output=self.HELP.rstrip())

    def _version(self, cmd: ParsedCommand) -> CommandResult:
        return CommandResult.success(f"{SOFTWARE_NAME} version {__version__}")

    def _quit(self, cmd: ParsedCommand) -> CommandResult:
        self.running = False
        return CommandResult.success("Goodbye!")


def run_script(repl: REPL, lines: List[str]) -> int:
    """Run command lines in order, stopping at the first failure"""
    for line in lines:
        stripped = line.strip()
        if not stripped or stripped.startswith('#'):
            continue
        result = repl.execute_line(stripped)
        if result is None:
            continue
        repl.print_result(result)
        if not result.ok:
            return 1
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the REPL."""
    parser = argparse.ArgumentParser(
        prog=SOFTWARE_NAME.lower(),
        description=f"{SOFTWARE_NAME} - Personal Data Table Manager"
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f"{SOFTWARE_NAME} version {__version__}"
    )
    parser.add_argument(
        '-D', '--data-dir',
        default=os.environ.get(DATA_DIR_ENV),
        help=f'Directory relative file paths resolve against (default: ${DATA_DIR_ENV} or the current directory)'
    )
    parser.add_argument(
        '-x', '--execute',
        help='Execute one command line and exit (use --execute="--list" for commands starting with a dash)'
    )
    parser.add_argument(
        '-f', '--file',
        help='Execute commands from a file, one per line, and exit'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    repl = REPL(args.data_dir)

    # Execute single command
    if args.execute:
        return run_script(repl, [args.execute])

    # Execute from file
    if args.file:
        try:
            with open(args.file, 'r', encoding='utf-8') as f:
                lines = f.read().splitlines()
        except OSError as e:
            print(f"Error: Cannot open file: {args.file} ({e.strerror or e})", file=sys.stderr)
            return 1
        return run_script(repl, lines)

    # Start interactive REPL
    repl.run()
    return 0


if __name__ == '__main__':
    sys.exit(main())
