"""Metadata providers - where scanned backend types come from."""
from .provider import MetadataProvider, StaticMetadataProvider
from .manifest import ManifestMetadataProvider, save_manifest

__all__ = [
    "MetadataProvider",
    "StaticMetadataProvider",
    "ManifestMetadataProvider",
    "save_manifest",
]
