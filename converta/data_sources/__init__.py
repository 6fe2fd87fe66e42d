"""
External data the engine reads: the partner directory.
"""
from converta.data_sources.partner_catalog import load_partner_catalog

__all__ = ["load_partner_catalog"]
