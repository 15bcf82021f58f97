"""ZeroTrust scan core: heuristic risk scoring and scan history views."""

__version__ = "1.0.0"
