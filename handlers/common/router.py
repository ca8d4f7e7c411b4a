"""
Common router - aggregates all common handlers.
"""
from aiogram import Router

from handlers.common import commands

router = Router(name="common")

# Include sub-routers
router.include_router(commands.router)
