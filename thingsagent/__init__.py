"""Script builders, runner, output parsers and click commands for the Things task manager."""

__version__ = "0.1.0"