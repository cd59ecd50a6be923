__title__ = "httpie-lite"
__description__ = "A small httpie-style command line HTTP client."
__version__ = "1.0"
