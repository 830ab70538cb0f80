"""Configuration, logging, error types and shared dependencies."""
