"""Pydantic models for records, forms, auth and API payloads."""
