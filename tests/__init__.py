"""
mockup-scroller Test Suite

- unit/: Unit tests for individual components and the batch pipeline
"""
