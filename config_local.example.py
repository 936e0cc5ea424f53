# config_local.example.py

"""
Example local overrides.

Usage:
  1) Copy this file to `config_local.py`
  2) Adjust values for your machine
  3) Never commit `config_local.py` (it is gitignored)

Prefer `.env` for everything else.
"""

# Example: keep the list in memory only (nothing is read or written)
# PERSISTENCE_ENABLED = False

# Example: only write the file on /save and on exit
# AUTOSAVE = False
