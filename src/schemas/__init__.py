"""API request/response schemas (HTTP layer)."""
