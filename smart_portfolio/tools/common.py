"""Shared tool-layer helpers."""

from __future__ import annotations

import os


def _absolute(file_path: str) -> str:
    return file_path if os.path.isabs(file_path) else os.path.abspath(file_path)


def read_text_argument(text: str, file_path: str) -> str:
    """Return inline text, or the UTF-8 contents of file_path when text is empty."""
    if text:
        return text
    if not file_path:
        raise ValueError("Provide either text or file_path.")
    absolute_path = _absolute(file_path)
    if not os.path.isfile(absolute_path):
        raise ValueError(f"File not found: {absolute_path}")
    with open(absolute_path, encoding="utf-8-sig") as handle:
        return handle.read()


def write_text_file(file_path: str, content: str) -> str:
    absolute_path = _absolute(file_path)
    try:
        with open(absolute_path, "w", encoding="utf-8", newline="\n") as handle:
            handle.write(content)
    except OSError as error:
        raise ValueError(f"Cannot write {absolute_path}: {error.strerror or error}") from error
    return absolute_path
