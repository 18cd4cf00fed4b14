"""Core infrastructure for bulkedit.

Paths, configuration, theming, and the error taxonomy shared by the
editing workflow and the CLI.
"""
