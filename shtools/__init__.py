"""Shell building blocks: patterns, path lookup, exit statuses, flags, getopts, read and options."""

__version__ = "0.1.0"