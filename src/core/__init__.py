"""Core: domain models, the alias storage port and the rule actions.

Nothing here imports adapters or the CLI.
"""
