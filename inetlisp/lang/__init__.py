"""Expressions, statements, parsing, compiling, defining, running and loading programs."""