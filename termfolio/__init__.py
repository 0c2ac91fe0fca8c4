"""A terminal-style portfolio: commands answering with HTML about, links, GitHub and repositories."""

__version__ = "0.1.0"