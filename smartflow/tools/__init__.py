"""smartflow.tools package

Command-line utilities run as `python -m smartflow.tools.<name>`.
No imports here; each tool pulls in only what it uses.
"""

__all__: list[str] = []
