"""
Resume data loading.

Resume data is a plain nested mapping (scalars for personal and contact fields,
lists of records for education/experience/projects, a record for skills).
The assembler does not validate it; this module only loads it from disk.
"""

import os
from pathlib import Path
from typing import Any, Dict, Union

from dotenv import load_dotenv
from omegaconf import OmegaConf

load_dotenv()
SAMPLE_RESUME_PATH = Path(
    os.getenv(
        "FOLIO_SAMPLE_RESUME_PATH",
        Path(__file__).parent / "data" / "sample_resume.yaml",
    )
)


def load_resume_data(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load resume data from a YAML or JSON file into plain containers.

    Args:
        path: Path to a .yaml, .yml or .json file

    Returns:
        Resume data as nested dicts and lists

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file's top level is not a mapping
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Resume data not found: {path}")

    # JSON is a subset of YAML, so OmegaConf reads both
    loaded = OmegaConf.to_container(OmegaConf.load(path), resolve=True)

    if not isinstance(loaded, dict):
        raise ValueError(f"Resume data must be a mapping at the top level: {path}")

    return loaded


def load_sample_resume() -> Dict[str, Any]:
    """
    Load the packaged sample resume used for template previews.

    Returns a fresh copy on every call, so callers may mutate it.
    """
    return load_resume_data(SAMPLE_RESUME_PATH)
