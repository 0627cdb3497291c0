"""User-interface adapters."""
