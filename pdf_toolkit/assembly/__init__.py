"""
Page-selection driven document assembly: planning, copying, packaging and progress.
"""

from .archive import ZipArchive
from .assembler import AssemblyPlan, AssemblyStep, DocumentAssembler, extract_plan, merge_plan, reorder_plan
from .packager import (
    EXTRACT_NAMING,
    MERGE_NAMING,
    SPLIT_ALL_NAMING,
    SPLIT_RANGES_NAMING,
    Bundle,
    BundleEntry,
    NamingPolicy,
    OutputArtifact,
    OutputPackager,
    SingleFile,
    save_artifact,
)
from .planner import Partition, PartitionPlan, SplitMode, plan_split
from .progress import (
    CallbackProgressReporter,
    NullProgressReporter,
    ProgressReporter,
    SegmentProgressReporter,
    TqdmProgressReporter,
)

__all__ = [
    'ZipArchive',
    'AssemblyPlan', 'AssemblyStep', 'DocumentAssembler', 'extract_plan', 'merge_plan', 'reorder_plan',
    'EXTRACT_NAMING', 'MERGE_NAMING', 'SPLIT_ALL_NAMING', 'SPLIT_RANGES_NAMING',
    'Bundle', 'BundleEntry', 'NamingPolicy', 'OutputArtifact', 'OutputPackager', 'SingleFile', 'save_artifact',
    'Partition', 'PartitionPlan', 'SplitMode', 'plan_split',
    'CallbackProgressReporter', 'NullProgressReporter', 'ProgressReporter', 'SegmentProgressReporter',
    'TqdmProgressReporter',
]
