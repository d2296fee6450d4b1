"""Sort integers with two stacks and eleven stack operations, printing the operations used."""

__version__ = "0.1.0"