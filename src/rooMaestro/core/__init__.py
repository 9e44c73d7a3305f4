"""Core functionality for rooMaestro.

This package contains the generation pipeline, its run configuration and
the logging setup. Import the submodules directly.
"""
