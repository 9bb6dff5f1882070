"""Synthetic record generation."""

from .records import build_record, default_records_template, parse_attribute, split_attributes

__all__ = ["build_record", "default_records_template", "parse_attribute", "split_attributes"]
