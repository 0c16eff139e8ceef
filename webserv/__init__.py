"""Building blocks for a small HTTP server: status codes, messages, multipart parsing, scanners, paths and filesystem queries."""

__version__ = "0.1.0"