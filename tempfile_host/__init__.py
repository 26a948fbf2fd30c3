"""Upload files or piped data to 0x0.st and keep a local history of links."""

__version__ = '2.2.0'
