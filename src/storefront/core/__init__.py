"""Core configuration and logging for Storefront."""
