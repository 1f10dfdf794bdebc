"""
Pinbox - Container shell launcher for the Pinocchio workshop environment.

Picks an available container engine, builds the toolchain image and drops you
into it with the current directory mounted.
"""

__version__ = "1.0.0"
__author__ = "Pinbox Team"
