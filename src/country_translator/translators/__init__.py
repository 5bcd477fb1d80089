from .base import Translator
from .registry import TranslatorRegistry
from .in_lab import CANADA, InLabByHandTranslator
from .json_translator import JSONTranslator

__all__ = [
    "Translator",
    "TranslatorRegistry",
    "CANADA",
    "InLabByHandTranslator",
    "JSONTranslator",
]
