"""agent-share CLI.

Installs and shares AI skills, rules, commands and agents between repositories.
See `agent-share --help` for details.
"""
