"""Command line interface for Perm transit schedules."""
