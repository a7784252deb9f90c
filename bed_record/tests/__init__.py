#!/usr/bin/env python3

"""
Test suite for BED record handling.

Unit tests covering:
- Field codecs and integer boundaries
- Record construction, access, ordering and schema definition
- Line parsing and formatting
- Stream reading and writing
- Reader configuration
"""
