"""Catalog Filter API: fetch, filter and summarize a remote product catalog."""
