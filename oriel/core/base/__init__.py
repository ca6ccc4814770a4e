"""
PyOriel - base package
Errors, tokens, signals and code stream
"""
