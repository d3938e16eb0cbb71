from logotest.schemas.schemas import (
    SKINS,
    PreviewRequest,
    ResponsiveUrls, LogoImageInfo,
    IndexView, DiffView, ErrorView,
)

__all__ = [
    "SKINS",
    "PreviewRequest",
    "ResponsiveUrls", "LogoImageInfo",
    "IndexView", "DiffView", "ErrorView",
]
