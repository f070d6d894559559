"""Чтение блоков ввода из текстового потока до sentinel-символа."""

from typing import Iterator, Optional, TextIO


def read_block(stream: TextIO, sentinel: str = ";") -> Optional[str]:
    """
    Чтение символов до sentinel (sentinel в блок не входит).

    При EOF непустой остаток возвращается как последний блок.

    Returns:
        Текст блока или None, если поток исчерпан и остаток пуст
    """
    chars = []
    while True:
        char = stream.read(1)
        if not char:
            break
        if char == sentinel:
            return "".join(chars)
        chars.append(char)

    block = "".join(chars)
    if block.strip():
        return block
    return None


def iter_blocks(stream: TextIO, sentinel: str = ";") -> Iterator[str]:
    """Генератор блоков до исчерпания потока."""
    while True:
        block = read_block(stream, sentinel)
        if block is None:
            return
        yield block
