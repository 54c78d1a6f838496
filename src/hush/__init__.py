"""Telegram bot that puts a cooldown on voice messages."""
