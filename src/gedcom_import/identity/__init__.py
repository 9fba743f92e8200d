from .uuid_factory import IdFactory, deterministic_uuid, new_uuid, normalize_pointer

__all__ = [
    "IdFactory",
    "deterministic_uuid",
    "new_uuid",
    "normalize_pointer",
]
