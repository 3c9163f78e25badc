"""Configuration, logging and storage primitives shared by all services."""
