# app/presentation/__init__.py

"""
Слой presentation — входная точка системы.
Здесь доступны HTTP-роуты и usecase-хэндлеры.
"""

__all__ = [
    "http",
    "usecases",
]
