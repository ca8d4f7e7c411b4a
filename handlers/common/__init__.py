"""
Common handlers - start and help commands.
"""

from handlers.common.router import router as common_router

__all__ = ["common_router"]
