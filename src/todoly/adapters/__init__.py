"""Persistence adapters: the JSON codec and the file it is stored in."""

from .file_storage import FileStorage
from .json_codec import JsonTaskCodec

__all__ = ["FileStorage", "JsonTaskCodec"]
