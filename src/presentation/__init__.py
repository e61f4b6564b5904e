"""
Presentation Layer Package

This package contains the presentation layer components,
which are responsible for handling HTTP requests and responses,
including API routes and console rendering for the CLI.
"""

from src.presentation import console, controllers

__all__ = ["controllers", "console"]
