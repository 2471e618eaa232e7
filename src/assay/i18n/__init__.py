"""Localized message catalogs (English, Spanish, French) and the renderer."""

from assay.i18n.catalog import Renderer, load_catalog

__all__ = ["Renderer", "load_catalog"]
