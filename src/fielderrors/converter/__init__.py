"""Message resolution: conversion strategies and the report converter."""

from fielderrors.converter.report_converter import (
    ReportConverter,
    form,
    make_converter,
    structured,
)
from fielderrors.converter.strategies import (
    ConversionStrategy,
    FixedTemplate,
    PassThrough,
    PatternEntry,
    PatternList,
    TypeMap,
    select_strategy,
)

__all__ = [
    "ConversionStrategy",
    "FixedTemplate",
    "PassThrough",
    "PatternEntry",
    "PatternList",
    "ReportConverter",
    "TypeMap",
    "form",
    "make_converter",
    "select_strategy",
    "structured",
]
