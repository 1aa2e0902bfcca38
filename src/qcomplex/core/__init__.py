"""
Core value type, arithmetic engine and literal contract.

Pure functions over immutable values: no I/O, no shared state.
"""
