from .base import REQUEST_KEY_PREFIX, Field, request_key_for
from .file_upload import FileUploadField
from .list_field import ListField, selected_labels

__all__ = [
    "REQUEST_KEY_PREFIX",
    "Field",
    "FileUploadField",
    "ListField",
    "request_key_for",
    "selected_labels",
]
