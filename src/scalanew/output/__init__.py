"""Output formatting for the scalanew CLI."""
