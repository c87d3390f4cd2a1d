from next_compat.build_output.inspectors import (
    has_unoptimized_image,
    uses_app_dir_router,
    uses_next_image,
)
from next_compat.build_output.readers import IDocumentReader, JsonDocumentReader

__all__ = [
    "IDocumentReader",
    "JsonDocumentReader",
    "has_unoptimized_image",
    "uses_app_dir_router",
    "uses_next_image",
]
