"""devenv-bootstrap — Docker configuration for Express.js projects."""

__version__ = "1.0.0"
