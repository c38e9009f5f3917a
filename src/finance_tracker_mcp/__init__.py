"""
Finance Tracker MCP: category, subcategory and operation storage over MCP.
"""

__version__ = "0.1.0"
