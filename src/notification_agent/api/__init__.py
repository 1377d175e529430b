"""Host bridge HTTP API."""
