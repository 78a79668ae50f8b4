"""Coordinators - Orchestration layer between screens and services."""

from .detail_controller import DetailController, DetailState, LoadStatus

__all__ = [
    "DetailController",
    "DetailState",
    "LoadStatus",
]
