"""Exporters for OFX and QIF interchange formats."""

from ledger_export.export.ofx import OfxExporter, export_ofx, to_ofx_type
from ledger_export.export.qif import QifExporter, export_qif, qif_header
from ledger_export.export.xml_writer import XmlNode, render, to_string

__all__ = [
    "OfxExporter",
    "QifExporter",
    "XmlNode",
    "export_ofx",
    "export_qif",
    "qif_header",
    "render",
    "to_ofx_type",
    "to_string",
]
