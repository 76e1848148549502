"""Infrastructure layer: post discovery and file I/O."""
