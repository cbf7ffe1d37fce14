"""Analyzer subpackage exports."""

from .base import SampleAnalyzer
from .frame import FrameAnalyzer

__all__ = ["SampleAnalyzer", "FrameAnalyzer"]
