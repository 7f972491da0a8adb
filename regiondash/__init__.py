"""regiondash: terminal dashboard for manager region statistics."""

__version__ = "0.1.0"
