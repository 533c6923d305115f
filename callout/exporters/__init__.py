"""Exporters for parsed transcript batches."""
