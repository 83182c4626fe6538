"""Configuration, logging, errors and database access."""
