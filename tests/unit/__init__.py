"""
Unit Tests
"""
