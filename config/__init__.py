"""
Configuration Package

- settings: All configuration values (env-overridable via .env)
- logging_setup: Root logging configuration for entry points
"""
