"""Pure calculation helpers used by the API and the CLI."""
