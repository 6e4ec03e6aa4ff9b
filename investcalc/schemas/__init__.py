"""pydantic data contracts."""
