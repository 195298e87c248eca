"""blog-at-issue: publish labeled GitHub issues as blog post pull requests."""

__version__ = "0.1.0"
