"""
Styled Variants - Theme-aware style variant resolution

A small runtime that lets UI components declare a base style plus named
variant groups, resolve a caller's variant choices into one concrete
style description, and separate styling props from pass-through props.
"""

__version__ = "1.0.0"
__author__ = "Styled Variants Contributors"
