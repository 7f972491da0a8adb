"""Main entry point when executing regiondash as a package.

This allows running the package using python -m regiondash.
"""

from regiondash.main import cli_entry_point

if __name__ == "__main__":
    cli_entry_point()
