"""Configuration — settings and logging setup for the optionkit CLI."""
