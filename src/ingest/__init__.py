"""Registry ingestion pipeline.

This module discovers and retrieves registry feeds concurrently and
parses them into user records for the transform layer.
"""
