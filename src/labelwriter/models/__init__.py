"""Pydantic models for labelwriter."""

from labelwriter.models.label import DYMO_LABELS, LabelSpec, get_label
from labelwriter.models.printer import PrinterConfig, PrinterDescriptor, PrinterInterface

__all__ = [
    "DYMO_LABELS",
    "LabelSpec",
    "PrinterConfig",
    "PrinterDescriptor",
    "PrinterInterface",
    "get_label",
]
