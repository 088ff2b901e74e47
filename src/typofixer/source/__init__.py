"""Adapters between source text and token streams."""

from .tokenizer import render, tokenize

__all__ = ["render", "tokenize"]
