"""filterprobe: reproduce adblocker filter matches from packaged extension builds."""

__version__ = "0.3.0"
