from __future__ import annotations
from typing import Dict, List, Sequence, Type

# ---- Global strategy registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that guess strategies inherit ----
class BaseSolver:
    """
    A strategy ranks guesses. It holds no per-session state, so one instance
    can serve any number of sessions.
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def suggest(self, pool: Sequence[str], vocabulary: Sequence[str]) -> List[str]:
        """
        Return guesses from `vocabulary`, most recommended first.
        """
        raise NotImplementedError("Override in subclass")
