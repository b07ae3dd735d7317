"""
shellfav - a favorites manager for shell commands.
Save command lines to a plain text file, list and remove them by index,
and replay a saved command by typing it after `fav`.
"""

__version__ = "1.0.0"
