"""Command line interface for cfgseek."""
