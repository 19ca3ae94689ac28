"""Engine — RREF, извлечение подпространств и сборка результата.

Порядок:
1. RREF Engine: Gauss–Jordan для A и Aᵗ
2. Subspace Extractor: C(A), C(Aᵗ), N(A), N(Aᵗ) + dimension check
3. Result Assembler: описания и LaTeX
"""

from .assembler import ResultAssembler
from .examples import EXAMPLE_MATRICES, ExampleMatrix, get_example, list_examples
from .pipeline import EngineConfig, EngineResult, FourSpacesEngine, compute_fundamental_subspaces
from .rref import RREFResult, compute_rank, compute_rref
from .subspaces import (
    DimensionTheoremCheck,
    FundamentalSubspaces,
    Subspace,
    SubspaceKind,
    extract_fundamental_subspaces,
)

__all__ = [
    "RREFResult",
    "compute_rref",
    "compute_rank",
    "Subspace",
    "SubspaceKind",
    "DimensionTheoremCheck",
    "FundamentalSubspaces",
    "extract_fundamental_subspaces",
    "ResultAssembler",
    "EngineConfig",
    "EngineResult",
    "FourSpacesEngine",
    "compute_fundamental_subspaces",
    "ExampleMatrix",
    "EXAMPLE_MATRICES",
    "get_example",
    "list_examples",
]
