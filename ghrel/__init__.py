"""ghrel - tag, changelog and publish a release from a file header."""

__version__ = "2.0.0"
