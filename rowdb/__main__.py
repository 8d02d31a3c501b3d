#!/usr/bin/env python3
"""
RowDB - Personal Data Table Manager
Entry point script

Run the REPL:
    python -m rowdb

Or use as a library:
    from rowdb import DatabaseManager
    manager = DatabaseManager()
    manager.create("People", ["Name", "Age"])
"""

import sys

from rowdb.core.repl import main

if __name__ == '__main__':
    sys.exit(main())
