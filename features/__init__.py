"""Feature packages exposed through the HTTP API."""
