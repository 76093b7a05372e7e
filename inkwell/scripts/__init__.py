"""One-off management commands (python -m inkwell.scripts.<name>)."""
