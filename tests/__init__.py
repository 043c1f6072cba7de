"""Test suite for the annotationdb library.

The test suite is organized into the following modules:
- tests/test_classify.py: Type sniffing and list classification
- tests/test_scalar.py: Scalar record <-> annotation conversion
- tests/test_lists.py: List record <-> annotation conversion
- tests/test_payload.py: JSON payload packing and unpacking
- tests/test_converter.py: Settings-bound converter facade
- tests/test_document_converter.py: Haystack/LangChain document adapters
- tests/utils: Tests for configuration, ID and logging utilities
"""
