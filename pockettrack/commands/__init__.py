"""CLI command implementations (the imperative shell)."""
