"""
cardthemes.

Discovery and loading of PySol card image sets.
"""
