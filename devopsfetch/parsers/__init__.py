"""
devopsfetch Parsers - One adapter per external tool output format.

Each adapter turns raw text into records and raises a ParseError subclass
naming its source when a line does not have the expected shape.
"""
