"""postctl: front-matter store and validator for Jekyll-style blog posts."""

__version__ = "0.1.0"
