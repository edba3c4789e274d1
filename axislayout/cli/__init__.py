"""Command-line subcommands"""
