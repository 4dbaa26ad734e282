"""Command line subcommands."""
