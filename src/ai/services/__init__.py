"""Serviços de IA."""

from ai.services.discovery_extractor import EXTRACTION_LABEL, DiscoveryExtractor

__all__ = [
    "EXTRACTION_LABEL",
    "DiscoveryExtractor",
]
