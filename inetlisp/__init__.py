"""An interaction-net language with Lisp syntax: parser, compiler, reducer and command line."""

__version__ = "0.1.0"