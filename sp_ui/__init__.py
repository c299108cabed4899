"""Command-line front-end for settings-pages."""
