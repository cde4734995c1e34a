"""scalanew — create and validate new Scala source files from the command line."""

__version__ = "0.1.0"
