"""
Google Analytics report extraction package.
"""
