# topmark:header:start
#
#   project      : IniKeep
#   file         : __main__.py
#   file_relpath : src/inikeep/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Allow ``python -m inikeep``."""

from inikeep.cli.main import cli

if __name__ == "__main__":
    cli()
