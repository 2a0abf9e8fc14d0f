"""
mxbot: Matrix-бот сообщества.

Мост между групповыми чатами Matrix и поиском по issue-трекеру:
конфигурация, состояние между перезапусками и тонкий слой обработчиков.
"""

__version__ = "0.4.0"
