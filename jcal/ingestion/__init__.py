"""Ingestion layer for calendar input files."""

from jcal.ingestion.ics_reader import ICSReader

__all__ = ["ICSReader"]
