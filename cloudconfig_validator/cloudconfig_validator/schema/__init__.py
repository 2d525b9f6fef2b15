"""Bundled cloud-config JSON Schemas, one directory per cloud-init release.

This package holds data files only; loading goes through
``models.json_schema_loader`` so the schemas stay independent of the code
that consumes them.
"""
