"""beamweld - greedy allocation of welded offcuts to required beam lengths."""

__version__ = "0.1.0"
