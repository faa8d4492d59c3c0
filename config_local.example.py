# config_local.example.py

"""
Example local overrides.

Usage:
  1) Copy this file to `config_local.py`
  2) Adjust values for your machine
  3) Never commit `config_local.py` (it is gitignored)

Prefer `.env` for anything you set once. Only these names are read.
"""

# Example: plain output even on a color terminal
# COLOR = False

# Example: chatty console logs while debugging
# LOG_LEVEL = "DEBUG"
