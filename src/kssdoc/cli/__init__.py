"""Command line interface for kssdoc."""
