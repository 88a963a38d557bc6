"""
Command-line interfaces for the PDF page tools.
"""
