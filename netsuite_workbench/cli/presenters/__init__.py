"""Presenters that render workbench results as rich tables."""

from .catalog import CatalogPresenter
from .export_summary import ExportSummaryPresenter
from .profile import ProfilePresenter

__all__ = ["CatalogPresenter", "ExportSummaryPresenter", "ProfilePresenter"]
