"""
Calendar provider interface and the Google implementation.
"""
