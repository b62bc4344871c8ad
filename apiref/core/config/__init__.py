"""Configuration models for apiref."""
