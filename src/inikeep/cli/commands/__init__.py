# topmark:header:start
#
#   project      : IniKeep
#   file         : __init__.py
#   file_relpath : src/inikeep/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""IniKeep CLI subcommands."""
