"""File system tree representation restricted to exported source files.

This module provides classes for building the tree of directories and qualifying
source files below a source directory, and for rendering it as text.
"""
