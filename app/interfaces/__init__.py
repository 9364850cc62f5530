"""
Service Interfaces

This module defines abstract base classes (interfaces) for the services in the
application, so that API dependencies can be typed against contracts and
replaced by fakes in tests.

Usage:
    from app.interfaces import IAnalysisService, IReviewStore

    async def my_function(analysis_service: IAnalysisService):
        result = await analysis_service.analyze("sample text")
"""

from app.interfaces.analysis_interface import IAnalysisService
from app.interfaces.storage_interface import IReviewStore

__all__ = ["IAnalysisService", "IReviewStore"]
