"""
Spell-check gate for document corpora.
"""
