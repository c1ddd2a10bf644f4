"""
Boards presentation app.

Command-line collaborator of the order and supply boards.
"""
