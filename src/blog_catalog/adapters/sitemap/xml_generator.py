"""XML sitemap generator."""

from xml.sax.saxutils import escape

from blog_catalog.core import CatalogEntry, SitemapGenerator


class XmlSitemapGenerator(SitemapGenerator):
    """Generate a sitemaps.org document from catalog entries."""

    def generate(self, entries: list[CatalogEntry], site_url: str) -> str:
        """Generate sitemap XML for the site root and every entry."""
        site = site_url.rstrip("/")

        lines = [
            '<?xml version="1.0" encoding="UTF-8"?>',
            '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">',
            "  <url>",
            f"    <loc>{escape(site)}/</loc>",
            "    <changefreq>daily</changefreq>",
            "    <priority>1.0</priority>",
            "  </url>",
        ]

        for entry in entries:
            lines.extend(self._format_entry(entry, site))

        lines.append("</urlset>")
        return "\n".join(lines)

    def _format_entry(self, entry: CatalogEntry, site: str) -> list[str]:
        """Format single sitemap url element."""
        return [
            "  <url>",
            f"    <loc>{escape(site)}/{escape(entry.slug)}</loc>",
            f"    <lastmod>{entry.metadata.published.isoformat()}</lastmod>",
            "    <changefreq>weekly</changefreq>",
            "    <priority>0.8</priority>",
            "  </url>",
        ]
