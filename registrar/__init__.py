"""
Registrar: an in-memory academic record store

Maintains students, exams and grades and answers a line-oriented command
stream with one response line per command.
"""

__version__ = "1.0.0"
__author__ = "Registrar Development Team"
__description__ = "In-memory academic record store driven by a command file"
