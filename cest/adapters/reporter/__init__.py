"""Reporter adapters for printing test results.

Implementations support the following output channels:
- Stdout (colorized terminal lines)
"""
