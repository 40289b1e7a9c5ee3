"""Ingestion utilities.

Reads the transactions CSV into row mappings whose values are all strings;
numeric and date coercion is left to the aggregation pipeline.
"""
