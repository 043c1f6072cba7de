"""Tests for utility modules.

This package contains tests for the utilities shared by the annotationdb
converters:

Configuration management:
    - YAML config loading and environment variable resolution
    - Conversion settings extraction and validation
    - Logger setup from config

Entity keys:
    - Key resolution for Haystack and LangChain documents

Logging:
    - Logger factory and environment-based levels
"""
