"""Intent normalization and disambiguation.

The intent layer converts an English, Japanese or Korean counter command into a `FunctionCall`
naming one of four operations, which the counter collaborator then executes.
"""
