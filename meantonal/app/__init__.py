"""Command-line front end and tabular rendering."""
