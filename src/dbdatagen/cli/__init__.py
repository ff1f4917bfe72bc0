"""Command-line interface for dbdatagen."""
