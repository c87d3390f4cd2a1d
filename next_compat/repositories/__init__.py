from next_compat.repositories.build_output import BuildOutputRepository

__all__ = ["BuildOutputRepository"]
