#!/usr/bin/env python3
"""
Pinbox CLI - Main module entry point.

This allows running the CLI as: python -m pinbox
"""

def main():
    """Entry point for the pinbox CLI."""
    from pinbox.cli.main import app
    app()

if __name__ == "__main__":
    main()
