"""Adapters layer for the Champion Catalog service.

This module contains the database, object storage, security and HTTP adapters.
"""
