"""Domain services for the cladding calculation pipeline."""

from .aggregator import RawRequirements, RequirementAggregator, RunRequirements
from .connectivity import ConnectivityValidator, Run, RunCache
from .connector_classifier import ConnectorClassifier, Joint
from .engine import CalculationError, CalculationResult, CladdingEngine, EngineSettings
from .packer import FOUR_PACK, TWO_PACK, BundleComposition, PackedRequirements, PanelPacker
from .panel_classifier import FacePanel, PanelClassifier
from .path_tracer import FlowSource, PathTracer, TracedCell, TracedRun
from .shape_detector import ShapeDetector
from .topology import GridTopology

__all__ = [
    "FOUR_PACK",
    "TWO_PACK",
    "BundleComposition",
    "CalculationError",
    "CalculationResult",
    "CladdingEngine",
    "ConnectivityValidator",
    "ConnectorClassifier",
    "EngineSettings",
    "FacePanel",
    "FlowSource",
    "GridTopology",
    "Joint",
    "PackedRequirements",
    "PanelClassifier",
    "PanelPacker",
    "PathTracer",
    "RawRequirements",
    "RequirementAggregator",
    "Run",
    "RunCache",
    "RunRequirements",
    "ShapeDetector",
    "TracedCell",
    "TracedRun",
]
