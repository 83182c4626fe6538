"""Interview record management service."""
