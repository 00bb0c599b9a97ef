"""Core text analysis and SRT parsing.

Leaves first: chars (character classifier), brackets (bracket matcher),
language (line classifier), splitter (split engine), reader, writer and
pipeline (Reader -> Policy -> Writer driver).
"""
