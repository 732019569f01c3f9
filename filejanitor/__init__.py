"""Sort the files of a directory into folders named after their extensions."""

__version__ = "0.1.0"