"""
Core repair engine, interfaces and exceptions.
"""
