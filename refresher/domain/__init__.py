"""Pure domain pieces: prefix/path resolution and the fixed refresh steps.

Nothing here touches the filesystem or spawns processes, so both can be
unit-tested without a real install tree.
"""
__all__ = ["paths", "steps"]
