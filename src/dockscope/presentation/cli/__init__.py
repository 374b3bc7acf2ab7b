"""Command-line interface modules."""

from .batch import main as batch_main
from .predict import main as predict_main

__all__ = [
    "batch_main",
    "predict_main",
]
