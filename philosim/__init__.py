"""A threaded simulation of the dining philosophers problem, with argument parsing and a command-line entry point."""

__version__ = "0.1.0"