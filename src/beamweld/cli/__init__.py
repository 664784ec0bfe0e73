"""Command line interface for beamweld."""
