from .url_resolver import RecordUrlResolver

__all__ = ["RecordUrlResolver"]
