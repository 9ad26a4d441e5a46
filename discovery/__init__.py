"""
discovery resolves per-service connection settings (URIs, API token and
transport security) with process-wide defaults.
"""

__version__ = "0.1.0"
