"""Environment and logging configuration."""
