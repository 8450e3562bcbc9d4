"""AI-assisted text improvement for the resume builder."""

__version__ = "0.1.0"
