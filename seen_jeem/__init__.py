"""Data layer for the Seen-Jeem trivia editor and player.

The Gradio UI lives in `app.py`. This package contains:
- normalization of exports from every historical schema into one shape
- merge/replace reconciliation against stored packs and questions
- the packs, questions and game-state API over a key-value store
"""
