# topmark:header:start
#
#   project      : tfremover
#   file         : __init__.py
#   file_relpath : src/tfremover/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""Subcommands of the tfremover CLI."""
