"""Command-line application for the homework solver."""
