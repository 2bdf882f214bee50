"""Activities API application package.

The local ``app`` package must take precedence over similarly named
distributions installed in the environment, so it is a regular package rather
than a namespace package.
"""
