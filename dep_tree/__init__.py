"""dep-tree: find the files that import a given file, with the chains leading back to it."""

from dep_tree.analysis.dependency_map import DependencyMapBuilder
from dep_tree.analysis.graph_models import ReverseDependencyIndex
from dep_tree.analysis.traversal import traverse
from dep_tree.models import AnalysisResult, DependentRecord, ImportEdge, Language, RepoInfo
from dep_tree.pipeline import analyze_dependencies
from dep_tree.scanner import extract_import_edges, extract_imports

__version__ = "0.1.0"

__all__ = [
    "AnalysisResult",
    "DependencyMapBuilder",
    "DependentRecord",
    "ImportEdge",
    "Language",
    "RepoInfo",
    "ReverseDependencyIndex",
    "analyze_dependencies",
    "extract_import_edges",
    "extract_imports",
    "traverse",
]
