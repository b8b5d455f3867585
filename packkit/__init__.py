"""Helpers for template-pack tools: logging, title casing, interrupt handling, directory walking and copying, template functions and a terminal spinner."""

__version__ = "0.1.0"
__all__ = ["filesystem", "funcs", "logger", "signalcontext", "spinner", "title", "walk"]