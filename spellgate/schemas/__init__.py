"""
Pydantic schemas for gate inputs and results.
"""
from spellgate.schemas.spellcheck import GateConfig, MisspellingReport

__all__ = [
    "GateConfig",
    "MisspellingReport",
]
