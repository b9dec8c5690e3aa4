class BlogReaderError(Exception):
    """Base class for failures in the post pipeline."""


class CatalogUnavailable(BlogReaderError):
    """The catalog could not be fetched or parsed."""


class PostNotFound(BlogReaderError):
    def __init__(self, post_id: str):
        super().__init__(f"Post not found: {post_id}")
        self.post_id = post_id


class MissingIdentifier(BlogReaderError):
    """No post id was supplied with the request."""


class ContentUnavailable(BlogReaderError):
    def __init__(self, post_id: str, reason: str = ""):
        super().__init__(f"Content unavailable for {post_id}: {reason}")
        self.post_id = post_id


class HighlightFailure(BlogReaderError):
    def __init__(self, language: str, reason: str = ""):
        super().__init__(f"Cannot highlight {language!r}: {reason}")
        self.language = language


class RenderingUnavailable(BlogReaderError):
    """Rendering dependencies did not become ready in time."""
