"""HTTP API for rendering aspiration cards."""
