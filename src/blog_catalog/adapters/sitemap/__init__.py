"""Sitemap rendering."""

from blog_catalog.adapters.sitemap.xml_generator import XmlSitemapGenerator

__all__ = ["XmlSitemapGenerator"]
