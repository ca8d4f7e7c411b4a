"""
Handlers package - modular bot handlers using aiogram Router

common/             - /start and /help
customer/
  └── cart/         - Cart screen, row deletion, cart commands
"""
