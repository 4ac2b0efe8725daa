"""CLI package for filterprobe."""
