"""Entry points and configuration loading."""
