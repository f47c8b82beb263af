"""Domain models and identifier rules.

Pure data: nothing in here touches the filesystem, git or the terminal.
"""
