"""
User interface layer for the chat profile editor.
"""
