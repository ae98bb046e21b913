"""Controller state and ports."""
