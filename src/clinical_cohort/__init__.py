"""Clinical cohort derivation engine."""

__version__ = "1.0.0"
