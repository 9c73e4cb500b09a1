"""
Core engine for tokenwright.

Color math, naming and token generation. Everything in this package is
synchronous and free of I/O except the token spec loader and the file
export helper.
"""
