"""Library App - Utilities Package

Helpers shared by the CLI and the core:
- Input validation and number parsing (validators.py)
- Output formatting in plain/json/rich modes (ui_helpers.py)
"""
