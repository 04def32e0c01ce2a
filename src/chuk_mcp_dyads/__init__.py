"""
CHUK Dyads - bar-playable two-note voicings for lap steel and other fretted instruments.
"""

__version__ = "0.1.0"
