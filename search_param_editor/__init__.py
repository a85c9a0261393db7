"""
Search Parameter Editor v1.0.0

Schema-driven editing of search-engine specific parameter sets (Comet,
MetaMorpheus, OMSSA, Sage, X!Tandem and MS-GF+).

Each tool is described by a ``ParameterSchema``; the engine converts a
parameter object into raw display values, validates edited values field
by field and across fields, works out which fields are editable, and
builds a fresh immutable parameter object once the user confirms.
"""

APP_NAME = "Search Parameter Editor"
APP_VERSION = "1.0.0"
APP_DATE = "2026-10-18"
__version__ = APP_VERSION
