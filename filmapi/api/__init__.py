"""REST API for the Film API catalog."""
