"""emlbox - bidirectional converter between mbox archives and eml files"""

__version__ = "0.3.0"
