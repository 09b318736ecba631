"""
Finance Robot: personal transaction ingestion, categorization and insights.
"""

__version__ = "0.1.0"
