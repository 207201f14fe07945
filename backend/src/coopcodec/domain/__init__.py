"""
Domain package - Identifier codecs and dividend arithmetic.

This package contains pure Python functions and value types with no I/O
and no state between calls. Validators return booleans, formatters return
their input unchanged when it cannot be formatted, and only generators
raise (see ``errors``).
"""
