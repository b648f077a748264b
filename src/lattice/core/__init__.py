"""Configuration, logging, errors and the HTTP transport."""
