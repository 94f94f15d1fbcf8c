"""Sinulog festival schedule browser."""
