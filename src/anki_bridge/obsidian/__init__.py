"""Obsidian document access."""

from .metadata_cache import FrontmatterMetadataCache, frontmatter_tags, inline_tags

__all__ = ["FrontmatterMetadataCache", "frontmatter_tags", "inline_tags"]
