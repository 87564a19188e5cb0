"""Command implementations for the benchreport CLI."""
