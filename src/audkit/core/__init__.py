"""Core scaffolding logic for audkit."""
