"""Configuration — models, TOML discovery, unified settings, logging."""
