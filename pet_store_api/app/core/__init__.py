"""Configuration, logging, errors and storage backends."""
