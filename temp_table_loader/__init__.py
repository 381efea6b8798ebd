"""
Temp Table Loader.

Builds a Databricks temp table one day at a time:
render a date-parameterised statement, run it, report the elapsed time.
"""

__version__ = "0.1.0"
