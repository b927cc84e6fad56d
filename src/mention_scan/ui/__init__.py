"""User interface glue."""
