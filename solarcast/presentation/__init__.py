"""
Presentation Layer Package

HTTP surface of the forecasting service.
"""

from solarcast.presentation import controllers

__all__ = ["controllers"]
