"""
Core configuration layer: models, field table, path resolution and loading.
"""
