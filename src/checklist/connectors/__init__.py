"""User-facing surfaces (console REPL + board renderer)."""
