"""
maat-insight - Software-evolution metrics mined from version-control logs

Parses Git, Subversion, Mercurial, Perforce and TFS history into change
records and ranks entities and authors by churn, ownership, logical
coupling, fragmentation and code age.
"""

__version__ = "0.1.0"

from .api import analyze_records, run_analysis
from .config import AnalysisConfig, load_config
from .dataset import Dataset
from .models import ChangeRecord, ResultTable

__all__ = [
    "run_analysis",  # Main entry point
    "analyze_records",
    "AnalysisConfig",
    "load_config",
    "ChangeRecord",
    "Dataset",
    "ResultTable",
]
